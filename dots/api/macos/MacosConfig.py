"""macOS preferences section of dots configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .DefaultsEntry import DefaultsEntry

_G = "NSGlobalDomain"

_DEFAULTS: list[tuple] = [
    # General UI/UX
    (_G, "NSNavPanelExpandedStateForSaveMode", "bool", True),
    (_G, "NSNavPanelExpandedStateForSaveMode2", "bool", True),
    (_G, "PMPrintingExpandedStateForPrint", "bool", True),
    (_G, "PMPrintingExpandedStateForPrint2", "bool", True),
    (_G, "NSDocumentSaveNewDocumentsToCloud", "bool", False),
    (_G, "NSDisableAutomaticTermination", "bool", True),
    # Keyboard
    (_G, "KeyRepeat", "int", 2),
    (_G, "InitialKeyRepeat", "int", 15),
    (_G, "ApplePressAndHoldEnabled", "bool", False),
    (_G, "NSAutomaticSpellingCorrectionEnabled", "bool", False),
    (_G, "NSAutomaticCapitalizationEnabled", "bool", False),
    (_G, "NSAutomaticDashSubstitutionEnabled", "bool", False),
    (_G, "NSAutomaticQuoteSubstitutionEnabled", "bool", False),
    (_G, "NSAutomaticPeriodSubstitutionEnabled", "bool", False),
    # Trackpad (tap behavior lives in the -currentHost domain)
    ("com.apple.driver.AppleBluetoothMultitouch.trackpad", "Clicking", "bool", True),
    (_G, "com.apple.mouse.tapBehavior", "int", 1, True),
    ("com.apple.AppleMultitouchTrackpad", "TrackpadThreeFingerDrag", "bool", True),
    # Finder
    (_G, "AppleShowAllExtensions", "bool", True),
    ("com.apple.finder", "ShowStatusBar", "bool", True),
    ("com.apple.finder", "ShowPathbar", "bool", True),
    ("com.apple.finder", "_FXSortFoldersFirst", "bool", True),
    ("com.apple.finder", "FXDefaultSearchScope", "string", "SCcf"),
    ("com.apple.finder", "FXEnableExtensionChangeWarning", "bool", False),
    ("com.apple.desktopservices", "DSDontWriteNetworkStores", "bool", True),
    ("com.apple.desktopservices", "DSDontWriteUSBStores", "bool", True),
    ("com.apple.finder", "FXPreferredViewStyle", "string", "Nlsv"),
    # Dock
    ("com.apple.dock", "tilesize", "int", 48),
    ("com.apple.dock", "autohide", "bool", True),
    ("com.apple.dock", "autohide-delay", "float", 0.0),
    ("com.apple.dock", "autohide-time-modifier", "float", 0.3),
    ("com.apple.dock", "show-recents", "bool", False),
    ("com.apple.dock", "minimize-to-application", "bool", True),
    # Safari
    ("com.apple.Safari", "ShowFullURLInSmartSearchField", "bool", True),
    ("com.apple.Safari", "IncludeDevelopMenu", "bool", True),
    ("com.apple.Safari", "WebKitDeveloperExtrasEnabledPreferenceKey", "bool", True),
    # Terminal
    ("com.apple.terminal", "StringEncodings", "array", [4]),
    # Activity Monitor
    ("com.apple.ActivityMonitor", "ShowCategory", "int", 0),
    ("com.apple.ActivityMonitor", "SortColumn", "string", "CPUUsage"),
    ("com.apple.ActivityMonitor", "SortDirection", "int", 0),
    # Screenshots
    ("com.apple.screencapture", "location", "string", "~/Downloads"),
    ("com.apple.screencapture", "type", "string", "png"),
    ("com.apple.screencapture", "disable-shadow", "bool", True),
]


def default_entries() -> list[DefaultsEntry]:
    return [
        DefaultsEntry(domain=domain, key=key, type=type_, value=value, current_host=bool(host))
        for domain, key, type_, value, *host in _DEFAULTS
    ]


class MacosConfig(BaseModel):
    """System preferences applied by `dots macos apply`.

    String values starting with ``~`` are expanded before being written.
    """

    model_config = ConfigDict(extra="forbid")

    defaults: list[DefaultsEntry] = Field(default_factory=default_entries, description="Entries to write")
    quit_apps: list[str] = Field(
        default_factory=lambda: ["System Preferences"],
        description="Applications quit before writing, so they do not override changes",
    )
    unhide_paths: list[str] = Field(default_factory=lambda: ["~/Library"], description="Paths made visible in Finder")
    restart_apps: list[str] = Field(
        default_factory=lambda: ["Dock", "Finder", "Safari", "SystemUIServer"],
        description="Applications restarted after writing",
    )
