APP_TITLE = "Profile Chart Studio"
BUILD_VERSION = "1.2.0"
