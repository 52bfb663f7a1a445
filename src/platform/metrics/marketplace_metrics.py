from prometheus_client import Counter, Histogram


class MarketplaceMetrics:
    """
    Marketplace core metrics collector

    Tracks checkout outcomes so double-sell races and rejections show up
    on the /metrics endpoint
    """

    def __init__(self):
        # ========== Checkout Metrics ==========
        self.checkout_requests = Counter(
            'marketplace_checkout_requests_total',
            'Total checkout attempts',
            ['operation', 'result'],  # operation: purchase/buy_now
        )

        self.checkout_failures = Counter(
            'marketplace_checkout_failures_total',
            'Rejected checkout items by reason',
            ['operation', 'reason'],
        )

        self.checkout_duration = Histogram(
            'marketplace_checkout_duration_seconds',
            'Checkout processing time',
            ['operation'],
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

        self.items_sold = Counter(
            'marketplace_items_sold_total',
            'Products moved from available to sold',
        )

        # ========== Catalogue Metrics ==========
        self.products_listed = Counter(
            'marketplace_products_listed_total',
            'Products created by sellers',
            ['source'],  # source: single/bulk
        )

        # ========== Image Metrics ==========
        self.images_stored = Counter(
            'marketplace_images_stored_total',
            'Listing and profile images written to storage',
            ['source', 'result'],  # source: upload/download, result: stored/rejected
        )

    # ========== Helper Methods ==========

    def record_checkout(
        self, *, operation: str, result: str, duration: float, sold: int = 0
    ) -> None:
        self.checkout_requests.labels(operation=operation, result=result).inc()
        self.checkout_duration.labels(operation=operation).observe(duration)
        if sold:
            self.items_sold.inc(sold)

    def record_checkout_failure(self, *, operation: str, reason: str) -> None:
        self.checkout_failures.labels(operation=operation, reason=reason).inc()

    def record_product_listed(self, *, source: str, count: int = 1) -> None:
        self.products_listed.labels(source=source).inc(count)

    def record_image(self, *, source: str, result: str) -> None:
        self.images_stored.labels(source=source, result=result).inc()


# Global metrics instance
metrics = MarketplaceMetrics()
