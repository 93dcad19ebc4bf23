"""hugo-lastmod：依圖片變動自動更新 Hugo bundle 的 lastmod。"""

__version__ = "0.1.0"
