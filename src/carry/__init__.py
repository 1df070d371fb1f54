"""stATOM carry-yield estimator.

Fetches live quotes (stATOM/ATOM pool price, Stride redemption rate,
lending-market borrow and supply rates) and turns them into an annualized
delta-neutral yield estimate.
"""

__version__ = "0.1.0"
