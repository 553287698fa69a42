from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

GEMINI_PAGE = """<!DOCTYPE html>
<html>
<head>
  <title>Gemini</title>
  <style>.response { color: red; }</style>
</head>
<body>
  <nav>Gemini Recent chats</nav>
  <script>window.seed = "=== USER_MESSAGE_99 ===";</script>
  <noscript>Enable JavaScript</noscript>
  <iframe src="about:blank">frame text</iframe>
  <div class="conversation">
    <div id="user-query-content-1"><p>A</p></div>
    <button>Show thinking</button>
    <div class="response"><p>B</p></div>
  </div>
  <div class="conversation">
    <div id="user-query-content-2"><p>C</p></div>
    <button>Show thinking</button>
    <div class="response"><p>D</p></div>
  </div>
</body>
</html>
"""

MINIMAL_PAGE = (
    '<div id="user-query-content-1">Hi</div>'
    "<div>Show thinking</div>"
    "<div>Hello there</div>"
)

MHTML_ARCHIVE = """From: <Saved by Blink>
Snapshot-Content-Location: https://gemini.google.com/app/abc123
Subject: Gemini
MIME-Version: 1.0
Content-Type: multipart/related;
\ttype="text/html";
\tboundary="----MultipartBoundary--abc----"

------MultipartBoundary--abc----
Content-Type: text/html
Content-ID: <frame-1@mhtml.blink>
Content-Transfer-Encoding: quoted-printable
Content-Location: https://gemini.google.com/app/abc123

<html><body><div id=3D"user-query-content-1">A</div><span>Show thinking</spa=
n><div>B</div></body></html>
------MultipartBoundary--abc----
Content-Type: text/css
Content-Transfer-Encoding: quoted-printable
Content-Location: cid:css-1@mhtml.blink

.response { color: red; }
------MultipartBoundary--abc------
"""

# Blink saves the HTML part without a charset parameter; the long folded
# Subject pushes MIME-Version far from the start of the file
QP_ARCHIVE_NO_CHARSET = (
    "From: <Saved by Blink>\n"
    "Subject: Gemini\n"
    + "".join(f"\t{'x' * 70}\n" for _ in range(60))
    + """MIME-Version: 1.0
Content-Type: multipart/related;
\ttype="text/html";
\tboundary="----MultipartBoundary--utf----"

------MultipartBoundary--utf----
Content-Type: text/html
Content-Transfer-Encoding: quoted-printable
Content-Location: https://gemini.google.com/app/def456

<html><body><div id=3D"user-query-content-1">caf=C3=A9</div><span>Show thinkin=
g</span><div>na=C3=AFve =F0=9F=A4=96</div></body></html>
------MultipartBoundary--utf------
"""
)

EIGHTBIT_ARCHIVE = """MIME-Version: 1.0
Content-Type: multipart/related; boundary="b8"

--b8
Content-Type: text/html; charset=utf-8
Content-Transfer-Encoding: 8bit

<html><body><div id="user-query-content-1">café</div><span>Show thinking</span><div>naïve 中</div></body></html>
--b8--
"""

UTF8_PAGE = (
    "<html><body>"
    '<div id="user-query-content-1">Grüße aus Köln</div>'
    "<button>Show thinking</button>"
    "<div>Привет, 世界 🤖</div>"
    "</body></html>"
)

FIXED_TIME =datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def gemini_page(tmp_path: Path) -> Path:
    path = tmp_path / "chat.html"
    path.write_text(GEMINI_PAGE, encoding="utf-8")
    return path


@pytest.fixture
def minimal_page(tmp_path: Path) -> Path:
    path = tmp_path / "minimal.html"
    path.write_text(MINIMAL_PAGE, encoding="utf-8")
    return path


@pytest.fixture
def mhtml_archive(tmp_path: Path) -> Path:
    path = tmp_path / "chat.mhtml"
    path.write_text(MHTML_ARCHIVE, encoding="utf-8")
    return path


@pytest.fixture
def qp_archive(tmp_path: Path) -> Path:
    path = tmp_path / "qp.mhtml"
    path.write_text(QP_ARCHIVE_NO_CHARSET, encoding="utf-8")
    return path


@pytest.fixture
def eightbit_archive(tmp_path: Path) -> Path:
    path = tmp_path / "8bit.mhtml"
    path.write_text(EIGHTBIT_ARCHIVE, encoding="utf-8")
    return path


@pytest.fixture
def utf8_page(tmp_path: Path) -> Path:
    path = tmp_path / "utf8.html"
    path.write_text(UTF8_PAGE, encoding="utf-8")
    return path
