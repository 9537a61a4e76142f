"""Version parsing and comparison for the CRAN, Debian, Maven and PyPI ecosystems."""