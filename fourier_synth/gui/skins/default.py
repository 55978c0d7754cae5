"""
Default Skin - Oscilloscope

Black graph, blue axes, red trace, green offset line and endpoints.
Dark control panel around it.
"""
import platform

SKIN = {
    # ==========================================================================
    # PALETTE - Base colours everything derives from
    # ==========================================================================

    # Backgrounds (darkest to lightest)
    'bg_dark': '#0d0d0d',
    'bg_mid': '#1a1a1a',
    'bg_highlight': '#2e2e2e',

    # Borders
    'border_dark': '#2a2a2a',
    'border_light': '#4a4a4a',

    # Text (dimmest to brightest)
    'text_dim': '#606060',
    'text_mid': '#909090',
    'text_bright': '#d0d0d0',

    # ==========================================================================
    # GRAPH
    # ==========================================================================

    'graph_bg': 'rgb(0, 0, 0)',
    'graph_axes': 'rgb(0, 127, 255)',
    'graph_line': 'rgb(255, 0, 0)',
    'graph_offset': 'rgb(0, 255, 0)',

    # ==========================================================================
    # CONTROLS
    # ==========================================================================

    'accent_cos': '#ff4040',
    'accent_sin': '#40a0ff',
    'accent_dc': '#00ff66',

    'button_bg': '#242424',
    'button_text': '#b0b0b0',
    'button_hover': '#2e2e2e',
    'button_checked_bg': '#00ff66',
    'button_checked_text': '#000000',

    'slider_groove': '#1a1a1a',
    'slider_groove_border': '#3a3a3a',
    'slider_handle': '#808080',
    'slider_handle_hover': '#a0a0a0',
    'slider_handle_border': '#4a4a4a',

    'field_bg': '#0d0d0d',
    'field_text': '#d0d0d0',
    'field_readonly_text': '#606060',

    # ==========================================================================
    # CONSOLE
    # ==========================================================================

    'log_debug': '#666666',
    'log_info': '#88ff88',
    'log_warning': '#ffaa44',
    'log_error': '#ff6666',

    # ==========================================================================
    # TYPOGRAPHY
    # ==========================================================================

    'font_family': 'Helvetica',
    'font_mono': 'Menlo' if platform.system() == 'Darwin' else 'Consolas',

    'font_size_title': 16,
    'font_size_section': 12,
    'font_size_label': 10,
    'font_size_small': 9,
    'font_size_tiny': 8,

    # ==========================================================================
    # DRAG SENSITIVITY (pixels per unit)
    # ==========================================================================

    'drag_value_normal': 5,
    'drag_value_fine': 15,
}
