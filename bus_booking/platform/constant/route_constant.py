API_BASE = '/api'

ADMIN_BASE = f'{API_BASE}/admin'
SEAT_BASE = f'{API_BASE}/seat'
BOOKING_BASE = f'{API_BASE}/booking'
PAYMENT_BASE = f'{API_BASE}/payment'
PICKUP_POINT_BASE = f'{API_BASE}/pickup-point'
DESTINATION_BASE = f'{API_BASE}/destination'
ACTIVITY_BASE = f'{API_BASE}/activity'

PAYMENT_SIGNATURE_HEADER = 'X-Payment-Signature'
