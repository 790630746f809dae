"""
Django CleanFoss - Cleaning booking pricing.

Usage:
    from cleanfoss import PricingService, PricingError

    summary = PricingService.quote([{"product_type": "car", "car": "vw-golf"}])
    summary.total, summary.vat
"""


def __getattr__(name):
    if name == "PricingService":
        from cleanfoss.service import PricingService

        return PricingService
    elif name == "PricingError":
        from cleanfoss.exceptions import PricingError

        return PricingError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["PricingService", "PricingError"]
__version__ = "0.1.0"
