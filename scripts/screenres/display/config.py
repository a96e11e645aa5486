class DisplayConfig:
    # Upper bounds used to tell positional arguments apart
    MAX_DISPLAYS = 8
    MAX_SCALE = 10

    # External tools
    XRANDR_BIN = "xrandr"
    DISPLAYPLACER_BIN = "displayplacer"
    GSETTINGS_BIN = "gsettings"
    OSASCRIPT_BIN = "osascript"

    # Five digits are enough for any width we expect to see
    MODE_LINE_FORMAT = "%5d x %4d @ %dx @ %dHz"
    CURRENT_MODE_MARKER = "  --> "
    OTHER_MODE_MARKER = "      "

    LOG_LEVEL = "INFO"
