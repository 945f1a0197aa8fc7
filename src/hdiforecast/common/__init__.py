"""src/hdiforecast/common/__init__.py"""
