"""Landing page, quickstart guide and version information."""

import platform
from html import escape

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from datayoinker import __version__

router = APIRouter(tags=["Pages"])

_LANDING_HTML = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <link rel=icon href=data:,>
    <title>DataYoinker</title>
  </head>
  <body>
    <h1>Welcome</h1>
    <p>DataYoinker stores whatever you send it. See
      <a href="/quickstart">the quickstart guide</a> to get going.</p>
  </body>
</html>
"""

_QUICKSTART_HTML = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <link rel=icon href=data:,>
    <title>DataYoinker Quickstart</title>
  </head>
  <body>
    <h1>Publishing data</h1>
    <p>Publishing is a single GET request, every query parameter becomes a field:</p>
    <pre><code>curl '{base}publish/yoink/for/demoESP32?tempreading=25.7&amp;name=home'</code></pre>
    <p>The stored yoink is echoed back:</p>
    <pre><code>{{
  "id": 1,
  "topic": "demoESP32",
  "timestamp": "2022-10-26T11:21:11Z",
  "content": {{"tempreading": 25.7, "name": "home"}}
}}</code></pre>
    <p>Numbers are stored as numbers, everything else as text.
      <code>POST {base}yoink/demoESP32</code> with a form body works too.</p>

    <h1>Retrieving data</h1>
    <ul>
      <li>Latest: <code>{base}get/latest/yoink/from/demoESP32</code></li>
      <li>Last five: <code>{base}get/last/5/yoinks/from/demoESP32</code></li>
      <li>Everything: <code>{base}get/all/yoinks/from/demoESP32</code></li>
    </ul>
    <p>REST style equivalents: <code>GET /yoink/demoESP32</code>,
      <code>GET /yoinks/demoESP32/5</code> and <code>GET /yoinks/demoESP32</code>.</p>
  </body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
async def landing() -> str:
    return _LANDING_HTML


@router.get("/quickstart", response_class=HTMLResponse)
async def quickstart(request: Request) -> str:
    """How to publish and retrieve, with URLs pointing at this instance."""
    return _QUICKSTART_HTML.format(base=escape(str(request.base_url)))


@router.get("/info", response_class=PlainTextResponse)
async def info() -> str:
    """Version information for the running instance."""
    return (
        "Version information about datayoinker:"
        f"\n\tVersion: {__version__}"
        f"\n\tPython: {platform.python_version()}"
        "\n"
    )
