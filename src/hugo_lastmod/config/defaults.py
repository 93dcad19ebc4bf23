"""預設設定值。"""

CONFIG_CANDIDATES = (
    "hugo-update-lastmod.config.json",
    "lastmod.config.json",
)

DEFAULT_CONFIG = {
    "targetDirs": ["content/galleries/*/", "content/stories/*/"],
    "extensions": ["jpg", "jpeg", "png", "webp", "avif"],
    "maxDepth": 1,
    "frontmatterDelim": "---",
    "gitAdd": True,
    "descriptorNames": ["index.md"],
    "cacheFile": ".hugo-update-lastmod.cache.json",
    "fingerprint": {
        "strategy": "mtime",
        "algorithm": "sha256",
        "chunkSizeKb": 1024,
        "parallelWorkers": 4,
    },
}
