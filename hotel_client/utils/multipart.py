"""
Multipart form construction for file-bearing requests.

Text fields become plain form parts; file-valued fields become binary parts.
Strings found in a file field are references to already-uploaded media and
are sent as ``existing<Field>`` so the server can keep them.
"""

import json
import mimetypes
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# (field name, (filename or None, content, content type or None))
FormPart = tuple[str, tuple[str | None, bytes | str, str | None]]


@dataclass(frozen=True)
class UploadFile:
    """A file to upload, held in memory so retries can resend it."""

    filename: str
    content: bytes
    content_type: str | None = None

    @classmethod
    def from_path(cls, path: str | Path, content_type: str | None = None) -> "UploadFile":
        path = Path(path)
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            content_type=content_type or mimetypes.guess_type(path.name)[0],
        )


@dataclass
class MultipartForm:
    parts: list[FormPart] = field(default_factory=list)

    def add_field(self, name: str, value: str) -> None:
        self.parts.append((name, (None, value, None)))

    def add_file(self, name: str, upload: UploadFile) -> None:
        content_type = upload.content_type or "application/octet-stream"
        self.parts.append((name, (upload.filename, upload.content, content_type)))

    def fields(self, name: str) -> list[Any]:
        """Return the content of every part with the given name."""
        return [part[1] for key, part in self.parts if key == name]

    @property
    def names(self) -> list[str]:
        return [key for key, _ in self.parts]


def existing_field_name(name: str) -> str:
    """``images`` -> ``existingImages``."""
    return f"existing{name[:1].upper()}{name[1:]}"


def as_upload(value: Any, default_name: str) -> UploadFile | None:
    """Coerce a file-like value into an UploadFile, or None if it isn't one."""
    if isinstance(value, UploadFile):
        return value
    if isinstance(value, Path):
        return UploadFile.from_path(value)
    if isinstance(value, bytes | bytearray):
        return UploadFile(filename=default_name, content=bytes(value))
    read = getattr(value, "read", None)
    if callable(read):
        content = read()
        if isinstance(content, str):
            content = content.encode("utf-8")
        name = Path(getattr(value, "name", "") or default_name).name
        return UploadFile(
            filename=name,
            content=content,
            content_type=mimetypes.guess_type(name)[0],
        )
    return None


def serialize_field(value: Any) -> str:
    if isinstance(value, dict | list | tuple):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_multipart_form(
    data: Mapping[str, Any], file_fields: Iterable[str]
) -> MultipartForm:
    """
    Build a multipart form from a payload dictionary.

    Args:
        data: Payload with text and file-valued entries
        file_fields: Keys whose values are files (single value or list)

    Returns:
        MultipartForm ready for the transport
    """
    file_fields = set(file_fields)
    form = MultipartForm()

    for key, value in data.items():
        if key in file_fields or value is None:
            continue
        form.add_field(key, serialize_field(value))

    for key in data:
        if key not in file_fields or data[key] is None:
            continue
        value = data[key]
        items = value if isinstance(value, list | tuple) else [value]
        for item in items:
            if isinstance(item, str):
                form.add_field(existing_field_name(key), item)
                continue
            upload = as_upload(item, default_name=key)
            if upload is not None:
                form.add_file(key, upload)

    return form
