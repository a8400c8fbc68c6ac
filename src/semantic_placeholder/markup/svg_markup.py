import re

DATA_URI_PREFIX = "data:image/svg+xml;utf8,"
FILL_COLOR = "#e5e7eb"
STROKE_COLOR = "#d1d5db"
TEXT_COLOR = "#6b7280"
FONT_FAMILY = "system-ui,-apple-system,Segoe UI,Roboto,Helvetica,Arial,sans-serif"
MIN_FONT_SIZE = 12

# Only the characters that break an inline url(...) or attribute value are escaped
URI_ESCAPES = (
    ("#", "%23"),
    ("<", "%3C"),
    (">", "%3E"),
    ('"', "%22"),
)
WHITESPACE_RUN = re.compile(r"\s+")

SVG_TEMPLATE = """
<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
  <rect x="0" y="0" width="{width}" height="{height}" fill="{fill}" stroke="{stroke}" stroke-width="1"/>
  <text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle"
        fill="{text_color}" font-family="{font_family}"
        font-size="{font_size}">
    {width} × {height}
  </text>
</svg>
"""


def font_size(width: int, height: int) -> int | float:
    return max(MIN_FONT_SIZE, min(width, height) / 10)


def format_number(value: int | float) -> str:
    if isinstance(value, int) or value.is_integer():
        return str(int(value))
    return repr(value)


def render(width: int, height: int) -> str:
    return SVG_TEMPLATE.format(
        width=width,
        height=height,
        fill=FILL_COLOR,
        stroke=STROKE_COLOR,
        text_color=TEXT_COLOR,
        font_family=FONT_FAMILY,
        font_size=format_number(font_size(width, height)),
    ).strip()


def to_data_uri(markup: str) -> str:
    for char, escaped in URI_ESCAPES:
        markup = markup.replace(char, escaped)
    return DATA_URI_PREFIX + WHITESPACE_RUN.sub(" ", markup)


def render_to_uri(width: int, height: int) -> str:
    return to_data_uri(render(width, height))
