"""
CleanFoss signals.

Signals:
    price_changed:
        Sent after a saved MainProduct's or Addon's price changes.

        Kwargs:
            sender: MainProduct or Addon class
            instance: The saved instance
            company_slug: Owning company slug, None for the shared catalog
            code: Catalog code of the product or addon
            field: "price" or "unit_price"
            old_price: Previous price in kroner (may be None)
            new_price: New price in kroner (may be None)

        Example handler::

            from cleanfoss.signals import price_changed

            def on_price_changed(sender, instance, code, old_price, new_price, **kwargs):
                logger.info("Price for %s changed: %s -> %s", code, old_price, new_price)

            price_changed.connect(on_price_changed)
"""

from django.dispatch import Signal

price_changed = Signal()
