from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    def exists(self, path: str) -> bool: ...

    async def read_text(self, path: str) -> str: ...


class LocalFileSystem:
    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    async def read_text(self, path: str) -> str:
        return await asyncio.to_thread(Path(path).read_text, encoding=self.encoding)
