"""Error kinds raised while resolving, matching and applying display modes."""


class DisplayError(Exception):
    """Base class; every subclass is terminal for the current invocation."""


class DegenerateRequest(DisplayError):
    def __init__(self):
        super().__init__("No usable mode arguments given (width is 0)")


class DisplayNotFound(DisplayError):
    def __init__(self, display_index: int, display_count: int):
        self.display_index = display_index
        self.display_count = display_count
        super().__init__(
            f"Display index ( {display_index} ) not found, {display_count} display(s) connected"
        )


class CatalogUnavailable(DisplayError):
    pass


class ModeNotAvailable(DisplayError):
    def __init__(self, request):
        self.request = request
        super().__init__(f"No mode matching {request} is available on this display")


class ModeRejected(DisplayError):
    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Mode {mode} is unavailable for the current desktop session")


class ConfigurationFailed(DisplayError):
    pass


class AppearanceError(DisplayError):
    pass
