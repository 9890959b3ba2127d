from .emit import dump, flow_style_option
