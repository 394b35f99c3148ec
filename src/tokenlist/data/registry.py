from .config import Settings
from .sources.binance_dex import BinanceDex
from .sources.binance_explorer import BinanceExplorer

class DataRegistry:
    def __init__(self, settings: Settings):
        self.dex = BinanceDex(settings.dex_url)
        self.explorer = BinanceExplorer(settings.explorer_url)

    @property
    def sources(self):
        return [self.dex, self.explorer]
