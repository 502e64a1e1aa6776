"""Endpoint paths and header names used by the files routes."""

from __future__ import annotations

GET_METADATA: str = "/files/get_metadata"
LIST_FOLDER: str = "/files/list_folder"
LIST_FOLDER_CONTINUE: str = f"{LIST_FOLDER}/continue"
DOWNLOAD: str = "/files/download"
UPLOAD: str = "/files/upload"

API_ARG_HEADER: str = "Dropbox-API-Arg"
JSON_CONTENT_TYPE: str = "application/json"
OCTET_STREAM_CONTENT_TYPE: str = "application/octet-stream"
