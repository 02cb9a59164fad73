from .ordering import compare_files, file_sort_key, sort_files, sorted_files

__all__ = [
    "compare_files",
    "file_sort_key",
    "sort_files",
    "sorted_files",
]
