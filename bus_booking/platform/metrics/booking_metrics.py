from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Bus booking core metrics collector

    Tracks seat contention on booking creation, booking status transitions,
    administrative seat changes and audit trail health.
    """

    def __init__(self):
        # ========== Booking Metrics ==========
        self.booking_create_requests = Counter(
            'booking_create_requests_total',
            'Booking creation attempts',
            ['result'],  # result: created/seat_conflict/rejected
        )

        self.booking_create_duration = Histogram(
            'booking_create_duration_seconds',
            'Atomic seat reservation and booking insert duration',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0],
        )

        self.booking_transitions = Counter(
            'booking_status_transitions_total',
            'Booking status transitions',
            ['transition'],  # transition: approve/cancel/delete
        )

        self.payment_callbacks = Counter(
            'payment_callbacks_total',
            'Payment provider callbacks',
            ['result'],  # result: completed/failed/duplicate
        )

        # ========== Seat Metrics ==========
        self.seat_state_changes = Counter(
            'seat_state_changes_total',
            'Seat state changes',
            ['state'],
        )

        # ========== Audit Metrics ==========
        self.activity_records = Counter(
            'activity_records_total',
            'Activity record attempts',
            ['result'],  # result: recorded/failed
        )

    # ========== Helper Methods ==========

    def record_booking_created(self, *, result: str, duration: float) -> None:
        self.booking_create_requests.labels(result=result).inc()
        self.booking_create_duration.observe(duration)

    def record_transition(self, *, transition: str) -> None:
        self.booking_transitions.labels(transition=transition).inc()

    def record_payment_callback(self, *, result: str) -> None:
        self.payment_callbacks.labels(result=result).inc()

    def record_seat_state_change(self, *, state: str) -> None:
        self.seat_state_changes.labels(state=state).inc()

    def record_activity(self, *, result: str) -> None:
        self.activity_records.labels(result=result).inc()


# Global metrics instance
metrics = BookingMetrics()
