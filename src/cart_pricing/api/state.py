"""Process-wide API state: the loaded catalog and the in-memory payout registry."""
from ..data.catalog import Catalog
from ..payouts import Payout

catalog = Catalog.load()

payouts: dict[str, Payout] = {}
