# Global pytest configuration for this repo
# - Ignore virtualenvs and build output during test discovery

collect_ignore_glob = [
    ".venv/**",
    "build/**",
    "dist/**",
]
