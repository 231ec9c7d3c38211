"""
HTML page template for previewing rendered embeds
"""
from markupsafe import escape


def render_embed_page(embed_html: str, title: str = "Embed Preview") -> str:
    """
    Render a standalone page around embed markup

    Args:
        embed_html: markup produced by HtmlFormatter.render
        title: page title (escaped)

    Returns:
        HTML string for the preview page
    """
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <style>
        body {{
            margin: 0;
            padding: 2rem;
            font-family: sans-serif;
        }}
        .embedvideo {{
            margin: 0;
            max-width: 100%;
        }}
        .embedvideo--autoresize {{
            width: 100%;
        }}
        .embedvideo-wrapper {{
            display: block;
            position: relative;
        }}
        .embedvideo-wrapper iframe {{
            width: 100%;
            height: 100%;
        }}
        .hidden {{
            display: none;
        }}
    </style>
</head>
<body>
    {embed_html}
</body>
</html>
"""
