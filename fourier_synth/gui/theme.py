"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling

Loads from active skin in fourier_synth/gui/skins/
Amplitude and gain sliders are vertical; styles below assume it.
"""
from .skins import active as skin

# =============================================================================
# SKIN ACCESS
# =============================================================================

def get(key, default='#ff00ff'):
    """Get value from active skin. Magenta = missing key."""
    return skin.SKIN.get(key, default)

# =============================================================================
# EXPORTS
# =============================================================================

FONT_FAMILY = get('font_family')
MONO_FONT = get('font_mono')

FONT_SIZES = {
    'title': get('font_size_title'),
    'section': get('font_size_section'),
    'label': get('font_size_label'),
    'small': get('font_size_small'),
    'tiny': get('font_size_tiny'),
}

DRAG_SENSITIVITY = {
    'value_normal': get('drag_value_normal'),
    'value_fine': get('drag_value_fine'),
}

COLORS = {
    # UI elements
    'background': get('bg_mid'),
    'background_dark': get('bg_dark'),
    'background_highlight': get('bg_highlight'),
    'border': get('border_dark'),
    'border_light': get('border_light'),
    'text': get('text_mid'),
    'text_bright': get('text_bright'),
    'text_dim': get('text_dim'),

    # Graph
    'graph_bg': get('graph_bg'),
    'graph_axes': get('graph_axes'),
    'graph_line': get('graph_line'),
    'graph_offset': get('graph_offset'),

    # Coefficient accents
    'cos': get('accent_cos'),
    'sin': get('accent_sin'),
    'dc': get('accent_dc'),

    # Sliders/controls
    'slider_groove': get('slider_groove'),
    'slider_handle': get('slider_handle'),
    'slider_handle_hover': get('slider_handle_hover'),
    'field_bg': get('field_bg'),
    'field_text': get('field_text'),
    'field_readonly_text': get('field_readonly_text'),

    # Console log levels
    'log_debug': get('log_debug'),
    'log_info': get('log_info'),
    'log_warning': get('log_warning'),
    'log_error': get('log_error'),
}


# =============================================================================
# STYLE FUNCTIONS
# =============================================================================

def button_style(checkable=False):
    """Standard push button; checkable buttons light up when checked."""
    checked = ""
    if checkable:
        checked = f"""
            QPushButton:checked {{
                background-color: {get('button_checked_bg')};
                color: {get('button_checked_text')};
            }}
        """
    return f"""
        QPushButton {{
            background-color: {get('button_bg')};
            color: {get('button_text')};
            border: 1px solid {COLORS['border']};
            border-radius: 3px;
            padding: 2px 6px;
        }}
        QPushButton:hover {{
            background-color: {get('button_hover')};
        }}
        QPushButton:disabled {{
            color: {COLORS['text_dim']};
        }}
        {checked}
    """


def slider_style():
    """Get standard vertical slider stylesheet."""
    return f"""
        QSlider {{
            border: none;
            background: transparent;
        }}
        QSlider::groove:vertical {{
            border: 1px solid {get('slider_groove_border')};
            width: 8px;
            background: {COLORS['slider_groove']};
            border-radius: 4px;
        }}
        QSlider::handle:vertical {{
            background: {COLORS['slider_handle']};
            border: 1px solid {get('slider_handle_border')};
            height: 12px;
            margin: 0 -3px;
            border-radius: 6px;
        }}
        QSlider::handle:vertical:hover {{
            background: {COLORS['slider_handle_hover']};
        }}
    """


def slider_style_center_notch():
    """
    Vertical slider with center notch mark.
    Use for bipolar amplitude sliders where the center is 0.
    """
    return f"""
        QSlider {{
            border: none;
            background: transparent;
        }}
        QSlider::groove:vertical {{
            border: 1px solid {get('slider_groove_border')};
            width: 8px;
            background: qlineargradient(
                x1:0, y1:0, x2:0, y2:1,
                stop:0 {COLORS['slider_groove']},
                stop:0.48 {COLORS['slider_groove']},
                stop:0.49 {get('border_light')},
                stop:0.51 {get('border_light')},
                stop:0.52 {COLORS['slider_groove']},
                stop:1 {COLORS['slider_groove']}
            );
            border-radius: 4px;
        }}
        QSlider::handle:vertical {{
            background: {COLORS['slider_handle']};
            border: 1px solid {get('slider_handle_border')};
            height: 12px;
            margin: 0 -3px;
            border-radius: 6px;
        }}
        QSlider::handle:vertical:hover {{
            background: {COLORS['slider_handle_hover']};
        }}
    """


def field_style():
    """Numeric entry field; read-only fields are dimmed."""
    return f"""
        QLineEdit {{
            background-color: {COLORS['field_bg']};
            color: {COLORS['field_text']};
            border: 1px solid {COLORS['border']};
            border-radius: 2px;
            padding: 1px 2px;
        }}
        QLineEdit:read-only {{
            color: {COLORS['field_readonly_text']};
        }}
    """
