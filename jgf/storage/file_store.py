from typing import Any, List, Optional
import glob
import json
from pathlib import Path

import aiofiles

from ..config import settings
from ..utils.logger import app_logger


def match_files(pattern: str) -> List[str]:
    """Resolve a glob pattern to a sorted list of file paths."""
    return sorted(path for path in glob.glob(pattern, recursive=True) if Path(path).is_file())


class JsonFileStore:
    """Async JSON file reader/writer."""
    
    def __init__(self, encoding: Optional[str] = None):
        self.logger = app_logger.bind(component="jgf_file_store")
        self.encoding = encoding or settings.file_encoding
    
    async def read_json(self, path: str) -> Any:
        """Read and parse a JSON file.
        
        Raises:
            FileNotFoundError: if the file doesn't exist.
            json.JSONDecodeError: if the file isn't valid JSON.
        """
        async with aiofiles.open(path, 'r', encoding=self.encoding) as f:
            content = await f.read()
        data = json.loads(content)
        self.logger.debug(f"Read JSON from {path}")
        return data
    
    async def write_json(self, path: str, data: Any, indent: Optional[int] = None) -> None:
        """Serialize ``data`` and write it to ``path``, creating parent directories."""
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(data, indent=indent, ensure_ascii=False)
        async with aiofiles.open(path, 'w', encoding=self.encoding) as f:
            await f.write(content)
        self.logger.debug(f"Wrote JSON to {path}")
    
    def match_files(self, pattern: str) -> List[str]:
        return match_files(pattern)
