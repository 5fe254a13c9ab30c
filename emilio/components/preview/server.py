# emilio/components/preview/server.py
"""
Local HTTP server for the live preview.

The host page embeds the rendered entry document in a sandboxed iframe and
polls for new revisions; on a new revision the iframe is removed and
recreated. The frame itself is served with a CSP sandbox header, so the
generated code runs with scripts enabled but in an opaque origin.
"""
from string import Template
from typing import Any, Dict, Optional

from aiohttp import web

from emilio.components.export.archive import ARCHIVE_NAME, build_archive
from emilio.components.generation.models import StructuredDocument
from emilio.components.preview.renderer import PreviewRenderer, RenderedPreview
from emilio.constants import PREVIEW_HOST, PREVIEW_POLL_INTERVAL_MS, PREVIEW_PORT, PREVIEW_SANDBOX
from emilio.core.events import DOCUMENT_READY, GENERATION_FAILED, EventBus, event_bus
from emilio.utils.logging import get_logger

logger = get_logger(__name__)

HOST_PAGE = Template("""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Emilio Preview</title>
<style>
  html, body { margin: 0; height: 100%; background: #fff; }
  #preview, iframe { width: 100%; height: 100%; border: 0; display: block; }
</style>
</head>
<body>
<div id="preview"><iframe sandbox="$sandbox" src="/frame?revision=$revision"></iframe></div>
<script>
  let revision = $revision;
  function showFrame(rev) {
    const container = document.getElementById("preview");
    container.innerHTML = "";
    const frame = document.createElement("iframe");
    frame.setAttribute("sandbox", "$sandbox");
    frame.src = "/frame?revision=" + rev;
    container.appendChild(frame);
  }
  async function poll() {
    try {
      const res = await fetch("/api/revision", { cache: "no-store" });
      const state = await res.json();
      if (state.revision !== revision) {
        revision = state.revision;
        showFrame(revision);
      }
    } catch (e) {
      console.warn("Preview server unreachable", e);
    }
    setTimeout(poll, $interval);
  }
  setTimeout(poll, $interval);
</script>
</body>
</html>
""")

NO_STORE = {"Cache-Control": "no-store"}


class PreviewServer:
    """Serves the latest rendered document and its assets over HTTP."""

    def __init__(
        self,
        renderer: Optional[PreviewRenderer] = None,
        host: str = PREVIEW_HOST,
        port: int = PREVIEW_PORT,
        bus: Optional[EventBus] = None,
    ):
        self.renderer = renderer or PreviewRenderer()
        self.host = host
        self.port = port
        self.document: Optional[StructuredDocument] = None
        self._bus = bus or event_bus
        self._runner: Optional[web.AppRunner] = None
        self.app = self._create_app()

    def _create_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/", self._handle_host)
        app.router.add_get("/frame", self._handle_frame)
        app.router.add_get("/assets/{token}/{name:.+}", self._handle_asset)
        app.router.add_get("/api/revision", self._handle_revision)
        app.router.add_get("/download", self._handle_download)
        return app

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    @property
    def preview(self) -> RenderedPreview:
        return self.renderer.current

    def update(self, document: Optional[StructuredDocument]) -> RenderedPreview:
        """Show a new document; the host page picks it up on its next poll."""
        self.document = document
        return self.renderer.render(document)

    async def _on_document_ready(self, event_type: str, data: Dict[str, Any]) -> None:
        self.update(data["document"])

    async def _on_generation_failed(self, event_type: str, data: Dict[str, Any]) -> None:
        # A failed generation discards the previous document and its assets
        self.update(None)

    async def start(self) -> None:
        """Bind the server and follow documents published on the event bus."""
        self._bus.subscribe(DOCUMENT_READY, self._on_document_ready)
        self._bus.subscribe(GENERATION_FAILED, self._on_generation_failed)
        self._runner = web.AppRunner(self.app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.port)
        await site.start()
        logger.info(f"Preview server running at {self.url}")

    async def stop(self) -> None:
        """Shut the server down and revoke every asset handle."""
        self._bus.unsubscribe(DOCUMENT_READY, self._on_document_ready)
        self._bus.unsubscribe(GENERATION_FAILED, self._on_generation_failed)
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
        self.renderer.close()
        logger.info("Preview server stopped")

    async def __aenter__(self) -> "PreviewServer":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()

    async def _handle_host(self, request: web.Request) -> web.Response:
        html = HOST_PAGE.substitute(
            sandbox=PREVIEW_SANDBOX,
            revision=self.preview.revision,
            interval=PREVIEW_POLL_INTERVAL_MS,
        )
        return web.Response(text=html, content_type="text/html", headers=NO_STORE)

    async def _handle_frame(self, request: web.Request) -> web.Response:
        headers = {"Content-Security-Policy": f"sandbox {PREVIEW_SANDBOX}", **NO_STORE}
        return web.Response(text=self.preview.html, content_type="text/html", headers=headers)

    async def _handle_asset(self, request: web.Request) -> web.Response:
        token = request.match_info["token"]
        name = request.match_info["name"]
        asset = self.renderer.arena.resolve(token)
        if asset is None or asset.name != name:
            logger.debug(f"Unknown or revoked asset requested: {token}/{name}")
            raise web.HTTPNotFound()

        # The frame runs in an opaque origin, so module scripts need CORS
        headers = {"Access-Control-Allow-Origin": "*", **NO_STORE}
        return web.Response(
            body=asset.content,
            content_type=asset.mime_type,
            charset="utf-8",
            headers=headers,
        )

    async def _handle_revision(self, request: web.Request) -> web.Response:
        return web.json_response(
            {"revision": self.preview.revision, "has_entry": self.preview.has_entry},
            headers=NO_STORE,
        )

    async def _handle_download(self, request: web.Request) -> web.Response:
        if self.document is None or not self.document.files:
            raise web.HTTPNotFound(text="Nothing to download yet.")

        return web.Response(
            body=build_archive(self.document.files),
            content_type="application/zip",
            headers={"Content-Disposition": f'attachment; filename="{ARCHIVE_NAME}"'},
        )
