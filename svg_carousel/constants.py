"""Built-in defaults; the settings file and the command line override them."""

TITLE = "SVG Carousel"
SVG_DIR = "./svgs"

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

# Labels used in the on-screen key legend
SHIFT_LABEL = "<SHIFT>"
LEFT_ARROW_LABEL = "<="
RIGHT_ARROW_LABEL = "=>"
LEFT_LETTER_LABEL = "<H>"
RIGHT_LETTER_LABEL = "<L>"
ESC_LABEL = "<ESC>"
QUIT_LETTER_LABEL = "<Q>"

EMPTY_PLACEHOLDER = "No images found"
