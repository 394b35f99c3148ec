from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

class DataSource(ABC):
    name: str
    BASE: str

    def __init__(self, base_url: Optional[str] = None):
        self.base = (base_url or self.BASE).rstrip("/")

    def url(self, path: str) -> str:
        return f"{self.base}/{path.lstrip('/')}"

    @abstractmethod
    async def health(self) -> Dict[str, Any]:
        ...
