from setuptools import find_packages, setup

setup(
    name="hugo-lastmod",
    version="0.1.0",
    description="依圖片變動自動更新 Hugo bundle 的 lastmod",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "Pillow"],
    },
    entry_points={
        "console_scripts": ["hugo-lastmod=hugo_lastmod.main:main"],
    },
)
