VERSION = "0.0.0.0.3"
BANNER = f"Lsp version {VERSION}"
EXIT_HINT = "Ctrl+C to exit"
PROMPT = "lsp> "

# name reported in parse failure messages
SOURCE_NAME = "<stdin>"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# deepest parenthesis nesting accepted by the parser, keeps parse and
# evaluation well below the interpreter recursion limit
MAX_NESTING = 200
