from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from decimal import Decimal

# Raw upstream records

class RawAsset(BaseModel):
    """Token descriptor as returned by the DEX `/tokens` endpoint."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    symbol: str
    original_symbol: str = ""
    name: str = ""

class RawMarketPair(BaseModel):
    """Live market as returned by the DEX `/markets` endpoint."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    base: str = Field(alias="base_asset_symbol")
    quote: str = Field(alias="quote_asset_symbol")
    lot_size: Decimal
    tick_size: Decimal

class ExplorerAsset(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    asset: str
    mapped_asset: str = Field("", alias="mappedAsset")
    name: str = ""
    asset_img: str = Field("", alias="assetImg")
    decimals: int = 0

class ExplorerAssetPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    total_num: int = Field(0, alias="totalNum")
    asset_info_list: List[ExplorerAsset] = Field(default_factory=list, alias="assetInfoList")

# Persisted records

class AssetInfo(BaseModel):
    """Contents of `blockchains/<chain>/assets/<symbol>/info.json`."""
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    symbol: Optional[str] = None
    type: Optional[str] = None
    decimals: Optional[int] = None
    description: Optional[str] = None
    website: Optional[str] = None
    explorer: Optional[str] = None
    status: Optional[str] = None
    id: Optional[str] = None

class Pair(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base: str
    lot_size: str = Field("", alias="lotSize")
    tick_size: str = Field("", alias="tickSize")

class Token(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    asset: str
    type: str
    address: str
    name: str
    symbol: str
    decimals: int
    logo_uri: str = Field(alias="logoURI")
    pairs: List[Pair] = Field(default_factory=list)

class Version(BaseModel):
    major: int = 0

class TokenListDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    logo_uri: str = Field("", alias="logoURI")
    timestamp: str = ""
    tokens: List[Token] = Field(default_factory=list)
    version: Version = Field(default_factory=Version)
