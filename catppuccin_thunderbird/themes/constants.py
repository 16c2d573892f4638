"""Theme build constants."""

from __future__ import annotations

# Seeds the gecko ids so they stay reproducible between builds. Never change it.
UUID_NAMESPACE = "6da2d448-69ec-48e0-aabf-3c6379788110"

ACCENTS: tuple[str, ...] = (
    "rosewater",
    "flamingo",
    "pink",
    "mauve",
    "red",
    "maroon",
    "peach",
    "yellow",
    "green",
    "teal",
    "sky",
    "sapphire",
    "blue",
    "lavender",
)

REFERENCE_LIGHT_FLAVOR = "latte"

MANIFEST_VERSION = 2
THEME_VERSION = "1.0.0"
STRICT_MIN_VERSION = "60.0"
PACKAGE_EXTENSION = ".xpi"
MANIFEST_FILENAME = "manifest.json"
IMAGES_FOLDER = "images"

ICON_FILES: tuple[str, ...] = (
    "icon16.png",
    "icon48.png",
    "icon128.png",
)

ICON_PATHS: dict[str, str] = {
    "16": "images/icon16.png",
    "48": "images/icon48.png",
    "128": "images/icon128.png",
}

EXPERIMENT_STYLESHEET = "styles.css"

EXPERIMENT_COLORS: dict[str, str] = {
    "spaces_bg": "--spaces-bg-color",
    "spaces_bg_active": "--spaces-button-active-bg-color",
    "spaces_button": "--spaces-button-active-text-color",
    "tree_view_bg": "--tree-view-bg",
    "bg_color": "--bg-color",
    "button_primary_bg": "--button-primary-background-color",
    "button_text": "--button-primary-text-color",
    "tree_pane_bg": "--tree-pane-background",
    "tree_card_bg": "--tree-card-background",
    "layout_bg_0": "--layout-background-0",
    "layout_bg_1": "--layout-background-1",
    "button_bg": "--button-background-color",
    "lwt_accent_color": "--lwt-accent-color",
    "list_container_background_selected_current": "--list-container-background-selected-current",
    "ab_cards_list_bg": "--ab-cards-list-bg",
    "in_content_box_info_background": "--in-content-box-info-background",
    "calendar_view_toggle_bg": "--calendar-view-toggle-background",
    "calendar_view_toggle_hover_bg": "--calendar-view-toggle-hover-background",
    "tabs_toolbar_bg": "--tabs-toolbar-background-color",
    "color_gray_70": "--color-gray-70",
    "color_gray_50": "--color-gray-50",
}

# Placeholder role replaced by the selected accent at resolution time.
ACCENT_ROLE = "accent"

# Output color key -> palette role. Shared by light and dark appearances.
COLOR_ROLE_MAP: dict[str, str] = {
    "frame": "base",
    "button_background_active": ACCENT_ROLE,
    "button_background_hover": "surface0",
    "icons": "text",
    "tab_text": "text",
    "tab_line": ACCENT_ROLE,
    "tab_loading": ACCENT_ROLE,
    "tab_selected": "base",
    "tab_background_text": "overlay1",
    "tab_background_separator": "surface0",
    "bookmark_text": "text",
    "toolbar": "base",
    "toolbar_field": "surface0",
    "toolbar_field_text": "text",
    "toolbar_field_highlight": ACCENT_ROLE,
    "toolbar_field_highlight_text": "mantle",
    "toolbar_field_border": "mantle",
    "toolbar_field_focus": "surface0",
    "toolbar_field_text_focus": "text",
    "toolbar_field_border_focus": ACCENT_ROLE,
    "toolbar_top_separator": "surface0",
    "toolbar_bottom_separator": "surface0",
    "toolbar_vertical_separator": "surface0",
    "sidebar": "base",
    "sidebar_text": "text",
    "sidebar_highlight": ACCENT_ROLE,
    "sidebar_highlight_text": "mantle",
    "sidebar_border": "surface0",
    "popup": "surface0",
    "popup_text": "text",
    "popup_border": "base",
    "popup_highlight": ACCENT_ROLE,
    "popup_highlight_text": "mantle",
    "spaces_bg": "mantle",
    "tree_view_bg": "crust",
    "bg_color": "base",
    "spaces_bg_active": ACCENT_ROLE,
    "button_primary_bg": ACCENT_ROLE,
    "button_text": "crust",
    "spaces_button": "crust",
    "tree_pane_bg": "crust",
    "tree_card_bg": "mantle",
    "layout_bg_0": "base",
    "layout_bg_1": "base",
    "button_bg": "mantle",
    "lwt_accent_color": "mantle",
    "list_container_background_selected_current": "mantle",
    "ab_cards_list_bg": "mantle",
    "in_content_box_info_background": "mantle",
    "calendar_view_toggle_bg": "mantle",
    "calendar_view_toggle_hover_bg": "surface0",
    "tabs_toolbar_bg": "mantle",
    "color_gray_70": "mantle",
    "color_gray_50": "surface1",
}
