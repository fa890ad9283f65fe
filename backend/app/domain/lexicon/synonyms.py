"""Synonym map: trader shorthand and variants rewritten to canonical terms.

Walked once, top to bottom, by the query normalizer. Canonical values use
underscores so a rewritten term is never itself a key.
"""

from types import MappingProxyType

SYNONYM_MAP: MappingProxyType[str, str] = MappingProxyType({
    # Price terms
    "ltp": "last_price",
    "last traded price": "last_price",
    "closing price": "last_price",
    "cmp": "last_price",
    "current market price": "last_price",

    # Stop loss variations
    "sl": "stop_loss",
    "stoploss": "stop_loss",
    "stop": "stop_loss",
    "protective stop": "stop_loss",
    "hard stop": "stop_loss",
    "trailing sl": "trailing_stop",
    "tsl": "trailing_stop",
    "trailing stoploss": "trailing_stop",

    # Target variations
    "tp": "target",
    "take profit": "target",
    "tgt": "target",
    "profit target": "target",

    # Position sizing
    "qty": "quantity",
    "lot": "lot_size",
    "lots": "lot_size",
    "position size": "position_sizing",
    "bet size": "position_sizing",

    # Indicators - RSI
    "rsi": "relative_strength_index",
    "relative strength": "relative_strength_index",

    # Indicators - MACD
    "macd": "macd",
    "moving average convergence divergence": "macd",

    # Indicators - Bollinger
    "bb": "bollinger_bands",
    "bollinger": "bollinger_bands",
    "boll bands": "bollinger_bands",

    # Moving averages
    "ma": "moving_average",
    "sma": "simple_moving_average",
    "ema": "exponential_moving_average",
    "dma": "daily_moving_average",
    "wma": "weighted_moving_average",
    "20 ema": "ema_20",
    "50 ema": "ema_50",
    "200 ema": "ema_200",
    "20 sma": "sma_20",
    "50 sma": "sma_50",
    "200 sma": "sma_200",
    "200 dma": "sma_200",

    # VWAP
    "vwap": "volume_weighted_average_price",
    "anchored vwap": "anchored_vwap",

    # Pivot points
    "cpr": "central_pivot_range",
    "pivot": "pivot_point",
    "floor pivot": "floor_pivots",
    "camarilla": "camarilla_pivots",
    "woodie": "woodie_pivots",

    # Support/Resistance
    "support": "support_level",
    "resistance": "resistance_level",
    "s/r": "support_resistance",
    "sr": "support_resistance",
    "demand zone": "support_level",
    "supply zone": "resistance_level",

    # Previous day levels
    "pdh": "previous_day_high",
    "pdl": "previous_day_low",
    "pdc": "previous_day_close",
    "previous high": "previous_day_high",
    "previous low": "previous_day_low",
    "yesterday high": "previous_day_high",
    "yesterday low": "previous_day_low",

    # Opening range
    "orb": "opening_range_breakout",
    "opening range": "opening_range",

    # Candlestick patterns
    "engulfing": "engulfing_pattern",
    "bullish engulfing": "bullish_engulfing",
    "bearish engulfing": "bearish_engulfing",
    "doji": "doji_pattern",
    "hammer": "hammer_pattern",
    "shooting star": "shooting_star_pattern",
    "morning star": "morning_star_pattern",
    "evening star": "evening_star_pattern",
    "harami": "harami_pattern",
    "marubozu": "marubozu_pattern",
    "pin bar": "pin_bar_pattern",
    "pinbar": "pin_bar_pattern",

    # Chart patterns
    "h&s": "head_and_shoulders",
    "head shoulders": "head_and_shoulders",
    "double top": "double_top_pattern",
    "double bottom": "double_bottom_pattern",
    "cup handle": "cup_and_handle",
    "cup and handle": "cup_and_handle",
    "flag": "flag_pattern",
    "bull flag": "bullish_flag",
    "bear flag": "bearish_flag",
    "pennant": "pennant_pattern",
    "wedge": "wedge_pattern",
    "rising wedge": "rising_wedge",
    "falling wedge": "falling_wedge",
    "triangle": "triangle_pattern",
    "ascending triangle": "ascending_triangle",
    "descending triangle": "descending_triangle",
    "symmetrical triangle": "symmetrical_triangle",

    # Trend terms
    "uptrend": "bullish_trend",
    "downtrend": "bearish_trend",
    "sideways": "range_bound",
    "ranging": "range_bound",
    "consolidation": "range_bound",
    "breakout": "breakout",
    "breakdown": "breakdown",
    "pullback": "pullback",
    "retracement": "pullback",
    "correction": "pullback",

    # Volume terms
    "vol": "volume",
    "rvol": "relative_volume",
    "relative volume": "relative_volume",
    "volume spike": "volume_surge",
    "obv": "on_balance_volume",
    "a/d": "accumulation_distribution",
    "accumulation": "accumulation_distribution",
    "distribution": "accumulation_distribution",

    # Divergence
    "div": "divergence",
    "bullish div": "bullish_divergence",
    "bearish div": "bearish_divergence",
    "hidden div": "hidden_divergence",

    # Options terms
    "ce": "call_option",
    "pe": "put_option",
    "call": "call_option",
    "put": "put_option",
    "atm": "at_the_money",
    "itm": "in_the_money",
    "otm": "out_of_the_money",
    "oi": "open_interest",
    "open interest": "open_interest",
    "iv": "implied_volatility",
    "implied vol": "implied_volatility",
    "pcr": "put_call_ratio",
    "put call ratio": "put_call_ratio",
    "max pain": "max_pain",
    "greeks": "option_greeks",

    # OI analysis
    "long buildup": "long_buildup",
    "short buildup": "short_buildup",
    "long unwinding": "long_unwinding",
    "short covering": "short_covering",
    "oi change": "open_interest_change",

    # Options strategies
    "straddle": "straddle_strategy",
    "strangle": "strangle_strategy",
    "iron condor": "iron_condor_strategy",
    "butterfly": "butterfly_strategy",
    "credit spread": "credit_spread",
    "debit spread": "debit_spread",
    "bull call spread": "bull_call_spread",
    "bear put spread": "bear_put_spread",
    "covered call": "covered_call",

    # Indian indices
    "nifty": "nifty_50",
    "nifty50": "nifty_50",
    "nifty 50": "nifty_50",
    "banknifty": "bank_nifty",
    "bank nifty": "bank_nifty",
    "bnf": "bank_nifty",
    "sensex": "sensex",
    "finnifty": "fin_nifty",
    "fin nifty": "fin_nifty",
    "midcap nifty": "nifty_midcap",

    # Indian market terms
    "fii": "foreign_institutional_investor",
    "dii": "domestic_institutional_investor",
    "mf": "mutual_fund",
    "retail": "retail_investor",
    "promoter": "promoter_holding",
    "pledge": "promoter_pledge",

    # Order types (Indian brokers)
    "mis": "margin_intraday_square_off",
    "cnc": "cash_and_carry",
    "nrml": "normal_carry_forward",
    "bo": "bracket_order",
    "co": "cover_order",
    "amo": "after_market_order",
    "gtt": "good_till_triggered",

    # Fees
    "stt": "securities_transaction_tax",
    "stamp duty": "stamp_duty",
    "gst": "goods_services_tax",
    "brokerage": "brokerage_fee",
    "dp charges": "depository_charges",

    # Trading styles
    "scalping": "scalper",
    "scalp": "scalper",
    "intraday": "intraday_trader",
    "day trading": "intraday_trader",
    "swing": "swing_trader",
    "swing trading": "swing_trader",
    "positional": "positional_trader",
    "btst": "buy_today_sell_tomorrow",
    "stbt": "sell_today_buy_tomorrow",

    # Risk terms
    "dd": "drawdown",
    "mdd": "max_drawdown",
    "max dd": "max_drawdown",
    "var": "value_at_risk",
    "sharpe": "sharpe_ratio",
    "sortino": "sortino_ratio",
    "r multiple": "r_multiple",
    "r:r": "risk_reward_ratio",
    "rr": "risk_reward_ratio",
    "risk reward": "risk_reward_ratio",

    # Performance terms
    "win rate": "win_rate",
    "winrate": "win_rate",
    "hit rate": "win_rate",
    "strike rate": "win_rate",
    "profit factor": "profit_factor",
    "pf": "profit_factor",
    "expectancy": "trade_expectancy",
    "edge": "trading_edge",
    "pnl": "profit_and_loss",
    "p&l": "profit_and_loss",
    "p/l": "profit_and_loss",
    "realized pnl": "realized_pnl",
    "unrealized pnl": "unrealized_pnl",
    "mtm": "mark_to_market",

    # Psychology terms
    "fomo": "fear_of_missing_out",
    "overtrading": "overtrading",
    "revenge trading": "revenge_trading",
    "tilt": "emotional_tilt",

    # Timeframes
    "1m": "1_minute",
    "5m": "5_minute",
    "15m": "15_minute",
    "1h": "1_hour",
    "4h": "4_hour",
    "1d": "daily",
    "1w": "weekly",
    "1M": "monthly",
    "htf": "higher_timeframe",
    "ltf": "lower_timeframe",
    "mtf": "multi_timeframe",

    # Colloquial Hindi-English (Indian retail)
    "maal": "accumulation",
    "circuit": "circuit_limit",
    "upper circuit": "upper_circuit",
    "lower circuit": "lower_circuit",
    "uc": "upper_circuit",
    "lc": "lower_circuit",
    "operator": "market_manipulation",
    "pump": "pump_and_dump",
    "dump": "pump_and_dump",
})
