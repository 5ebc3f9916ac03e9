from .file_store import JsonFileStore, match_files

__all__ = ['JsonFileStore', 'match_files']
