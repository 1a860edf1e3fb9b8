type Tick = int
type SqrtPriceX96 = int
type Liquidity = int
type LiquidityDelta = int
