import base64
import io
import mimetypes
from pathlib import Path

import docx
import fitz

TEXT_EXTENSIONS = (".txt", ".md", ".html", ".rtf")
ANALYZER_TYPES = ["txt", "md", "html", "rtf", "pdf", "docx"]
CHAT_ATTACHMENT_TYPES = ["png", "jpg", "jpeg", "gif", "webp", "txt", "md", "pdf"]


def read_pdf(data: bytes) -> str:
    with fitz.open(stream=data, filetype="pdf") as pdf:
        return "".join(page.get_text() for page in pdf)


def read_docx(data: bytes) -> str:
    return "\n".join(p.text for p in docx.Document(io.BytesIO(data)).paragraphs)


def read_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def extract_text(filename: str, data: bytes) -> str:
    suffix = Path(filename).suffix.lower()
    if suffix == ".pdf":
        return read_pdf(data)
    if suffix == ".docx":
        return read_docx(data)
    if suffix in TEXT_EXTENSIONS:
        return read_text(data)
    raise ValueError(f"Unsupported file type: {suffix or filename}")


def guess_mime_type(filename: str, fallback: str = "application/octet-stream") -> str:
    suffix = Path(filename).suffix.lower()
    if suffix == ".md":
        return "text/plain"
    return mimetypes.guess_type(filename)[0] or fallback or "application/octet-stream"


def to_data_url(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def attachment_prompt(mime_type: str, filename: str) -> str:
    """Default question when a file is sent without text."""
    if mime_type.startswith("image/"):
        return "What do you see in this image?"
    return f"Please analyze and summarize this document: {filename}"
