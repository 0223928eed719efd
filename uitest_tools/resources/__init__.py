"""
Bundled resources for "classpath:" settings.

``driver.url.chrome: classpath:drivers/chromedriver`` resolves to
``drivers/chromedriver`` inside this package. Place driver binaries under
``drivers/`` before running UI tests.
"""
