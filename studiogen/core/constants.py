# studiogen/core/constants.py
"""
Project-wide constants.
Do not import from layout or emit here. This is a leaf module.
"""

APP_NAME = "studiogen"
APP_VERSION = "0.1.0"

# Mode for every directory the generator creates
DIR_MODE = 0o775

# Gradle plugin identifiers
PLUGIN_LIBRARY = "com.android.library"
PLUGIN_APPLICATION = "com.android.application"

# Paths relative to the base directory, never absolute
LIBS_DIR = "libs"
SRC_DIR = "src/main/java"
TEST_DIR = "src/androidTest/java"
ASSETS_DIR = "src/main/assets"
JNI_LIBS_DIR = "src/main/jniLibs"
RES_DIR = "src/main/res"
MANIFEST_FILE = "src/main/AndroidManifest.xml"
GRADLE_BUILD_FILE = "build.gradle"
GRADLE_SETTINGS_FILE = "settings.gradle"
PROGUARD_FILE = "proguard-rules.pro"

# Written to settings.gradle as-is
GRADLE_SETTINGS_TEXT = "\n"
