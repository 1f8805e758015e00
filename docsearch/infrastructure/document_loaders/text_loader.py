from pathlib import Path


class TextLoader:

    EXTENSIONS = (".txt",)

    def __init__(self, encoding: str = "utf-8-sig"):
        # utf-8-sig drops a leading byte-order mark
        self._encoding = encoding

    def supports(self, file_path: Path) -> bool:
        return file_path.name.lower().endswith(self.EXTENSIONS)

    def load(self, file_path: Path) -> str:
        return file_path.read_text(encoding=self._encoding)
