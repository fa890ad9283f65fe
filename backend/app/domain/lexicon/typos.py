"""Known misspellings and their corrections, applied by substring replacement."""

from types import MappingProxyType

COMMON_TYPOS: MappingProxyType[str, str] = MappingProxyType({
    "pe ration": "pe ratio",
    "pb ration": "pb ratio",
    "divident": "dividend",
    "divdend": "dividend",
    "yeild": "yield",
    "yiled": "yield",
    "retrun": "return",
    "retruns": "returns",
    "grwoth": "growth",
    "growht": "growth",
    "margni": "margin",
    "marign": "margin",
    "volatiltiy": "volatility",
    "voaltility": "volatility",
    "intrest": "interest",
    "interset": "interest",
    "bullsih": "bullish",
    "bearsih": "bearish",
    "buyllish": "bullish",
    "bearisch": "bearish",
    "techncial": "technical",
    "techincal": "technical",
    "fundamnetal": "fundamental",
    "fundamentla": "fundamental",
    "analyiss": "analysis",
    "analsyis": "analysis",
    "valuaiton": "valuation",
    "valuatoin": "valuation",
    "shareholdign": "shareholding",
    "shareholidng": "shareholding",
    "promtoer": "promoter",
    "pormter": "promoter",
    "sensxe": "sensex",
    "snesex": "sensex",
    "nifyt": "nifty",
    "nifity": "nifty",
    "buyabck": "buyback",
    "buybakc": "buyback",
    "sotcks": "stocks",
    "stocka": "stocks",
    "comapnies": "companies",
    "compaines": "companies",
    "sectoer": "sector",
    "sectro": "sector",
})
