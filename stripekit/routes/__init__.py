"""Resource route groups built on the shared API handler."""

from stripekit.routes.authorizations import AuthorizationRoutes
from stripekit.routes.balance import BalanceRoutes
from stripekit.routes.base import RouteGroup
from stripekit.routes.locations import LocationRoutes
from stripekit.routes.persons import PersonRoutes
from stripekit.routes.sources import SourceRoutes
from stripekit.routes.topups import TopUpRoutes

__all__ = [
    "AuthorizationRoutes",
    "BalanceRoutes",
    "LocationRoutes",
    "PersonRoutes",
    "RouteGroup",
    "SourceRoutes",
    "TopUpRoutes",
]
