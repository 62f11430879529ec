APP_ORG = "MarkdownTextInput"
APP_NAME = "Markdown Text Input"

# Toolbar order used when the config does not name one.
DEFAULT_ACTIONS = ("bold", "italic", "title", "link", "list")
DEFAULT_MAX_LINES = 10
DEFAULT_LOG_LEVEL = "WARNING"

CSS_PREVIEW = """
:root { --bg:#ffffff; --fg:#111; --muted:#555; --code:#f4f6f8; --border:#ddd; --link:#0b6bfd; }
@media (prefers-color-scheme: dark) {
  :root { --bg:#0f1115; --fg:#e7e9ee; --muted:#a0a4ae; --code:#1a1d24; --border:#2a2f3a; --link:#7aa2ff; }
}
html,body { background:var(--bg); color:var(--fg); }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1.25rem; line-height: 1.55; }
h1,h2,h3,h4,h5,h6 { margin-top: 1.2em; }
code { background:var(--code); padding:.15rem .3rem; border-radius:6px; }
a { color:var(--link); text-decoration:none; } a:hover { text-decoration:underline; }
del { color:var(--muted); }
ul,ol { padding-left:1.5rem; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""
