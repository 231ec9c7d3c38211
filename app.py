"""
A small Flask app for previewing embed markup

Renders any service from the catalogue inside a standalone page, the same way
a host document would embed it.
"""
import os
import logging
from typing import Optional

from flask import Flask, Response, request
from markupsafe import escape

from consent_policy import ConsentPolicy, EnvironmentConfig
from html_formatter import HtmlFormatter
from messages import MessageCatalog
from oembed_client import OEmbedClient
from player_template import render_embed_page
from service_catalog import InvalidIdError, UnknownServiceError, create_service
from url_expander import ServerUrlExpander

TRUE_ARGS = {"1", "true", "yes", "on"}
PLAIN_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


def _int_arg(name: str) -> Optional[int]:
    value = request.args.get(name, "")
    return int(value) if value.isdecimal() else None


def _bool_arg(name: str) -> bool:
    return request.args.get(name, "").lower() in TRUE_ARGS


class EmbedPreviewApp:
    def __init__(self, formatter: Optional[HtmlFormatter] = None):
        self.app = Flask(__name__)
        self.app_url = os.environ.get("APP_URL", "http://localhost:3000")

        # Defaults read consent flags from the environment on every render
        self.formatter = formatter or HtmlFormatter(
            policy=ConsentPolicy(EnvironmentConfig()),
            messages=MessageCatalog(),
            url_expander=ServerUrlExpander(self.app_url),
            oembed_resolver=OEmbedClient(),
        )

        self.register_routes()

    def register_routes(self):
        """Register HTTP routes"""

        @self.app.route("/health")
        def health():
            return {"status": "ok"}

        @self.app.route("/embed/<service_key>/<path:resource_id>")
        def serve_embed(service_key, resource_id):
            """Serve a preview page for one embed"""
            try:
                service = create_service(
                    service_key,
                    resource_id,
                    width=_int_arg("width"),
                    height=_int_arg("height"),
                    title=request.args.get("title") or None,
                    local_thumb=request.args.get("thumb") or None,
                    parent=request.host.split(":")[0],
                )
            except UnknownServiceError as e:
                return str(e), 404, PLAIN_TEXT
            except InvalidIdError as e:
                return str(e), 400, PLAIN_TEXT

            embed_html = self.formatter.render(service, {
                "service": service_key,
                "autoresize": _bool_arg("autoresize"),
                "withConsent": _bool_arg("consent"),
                # The caption is inserted as markup; query input is plain text
                "description": str(escape(request.args.get("description", ""))),
            })

            page = render_embed_page(embed_html, title=service.title or "Embed Preview")
            return Response(page, mimetype="text/html")

    def start(self):
        """Start the preview server"""
        port = int(os.environ.get("PORT", 3000))
        print(f"⚡️ Embed preview is running on port {port}!")
        self.app.run(port=port)


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    app = EmbedPreviewApp()
    app.start()
