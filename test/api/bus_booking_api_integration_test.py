"""
HTTP smoke tests

The app starts through its real lifespan (DI wiring, table creation, seat
registry and default catalog bootstrap) against the SQLite database configured
in conftest. One client serves the whole module, so every test uses its own
seat numbers and admin e-mails.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Generator

from fastapi.testclient import TestClient
import pytest
import uuid_utils.compat as uuid_utils

from bus_booking.main import app
from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.constant.route_constant import PAYMENT_SIGNATURE_HEADER


PASSWORD = 'P@ssw0rd!'


@pytest.fixture(scope='module')
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def logged_in_client(client: TestClient) -> TestClient:
    email = f'admin-{uuid_utils.uuid7().hex[:12]}@example.com'
    response = client.post(
        '/api/admin', json={'email': email, 'password': PASSWORD, 'full_name': 'Yaw Mensah'}
    )
    assert response.status_code == 201

    response = client.post('/api/admin/login', json={'email': email, 'password': PASSWORD})
    assert response.status_code == 200
    assert settings.AUTH_COOKIE_NAME in response.cookies
    return client


def _catalog_ids(client: TestClient) -> dict[str, Any]:
    pickup_points = client.get('/api/pickup-point').json()
    destinations = client.get('/api/destination').json()
    return {
        'pickup_point_id': next(p['id'] for p in pickup_points if p['name'] == 'Apowa'),
        'destination_id': next(d['id'] for d in destinations if d['name'] == 'Accra'),
    }


def _booking_payload(client: TestClient, *, seat_number: int) -> dict[str, Any]:
    return {
        'full_name': 'Kofi Asante',
        'email': 'kofi@example.com',
        'phone': '0241234567',
        'contact_person_name': 'Ama Asante',
        'contact_person_phone': '0209876543',
        'passenger_class': 'Level 100',
        'departure_date': (date.today() + timedelta(days=7)).isoformat(),
        'seat_number': seat_number,
        **_catalog_ids(client),
    }


@pytest.mark.integration
class TestPublicEndpoints:
    def test_health(self, client: TestClient) -> None:
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_seat_map_is_bootstrapped(self, client: TestClient) -> None:
        response = client.get('/api/seat')

        assert response.status_code == 200
        body = response.json()
        assert body['capacity'] == 31
        assert [s['seat_number'] for s in body['seats']] == list(range(1, 32))

    def test_default_catalog_is_seeded(self, client: TestClient) -> None:
        pickup_names = {p['name'] for p in client.get('/api/pickup-point').json()}
        destinations = {d['name']: d['price'] for d in client.get('/api/destination').json()}

        assert {'Apowa', 'Kwesimintsim', 'Apolo', 'Fijai'} <= pickup_names
        assert Decimal(str(destinations['Accra'])) == Decimal('40')

    def test_admin_endpoints_need_a_session(self, client: TestClient) -> None:
        client.cookies.clear()

        assert client.get('/api/booking').status_code == 401
        assert client.get('/api/activity').status_code == 401
        assert client.patch('/api/seat/3', json={'blocked': True}).status_code == 401

    def test_invalid_booking_request(self, client: TestClient) -> None:
        payload = _booking_payload(client, seat_number=99)

        response = client.post('/api/booking', json=payload)

        assert response.status_code == 400
        assert 'seat_number' in response.json()['detail']

    @pytest.mark.parametrize('email', ['kofi@example..com', '.kofi@example.com', 'not-an-email'])
    def test_malformed_email_is_rejected(self, client: TestClient, email: str) -> None:
        payload = {**_booking_payload(client, seat_number=30), 'email': email}

        response = client.post('/api/booking', json=payload)

        assert response.status_code == 400
        assert response.json()['detail'][0]['loc'] == ['body', 'email']


@pytest.mark.integration
class TestBookingFlow:
    def test_create_approve_and_pay(self, logged_in_client: TestClient) -> None:
        client = logged_in_client

        # Given: a passenger books seat 21
        response = client.post('/api/booking', json=_booking_payload(client, seat_number=21))
        assert response.status_code == 201
        change = response.json()
        booking_id = change['booking']['id']
        assert change['booking']['status'] == 'pending'
        assert Decimal(str(change['booking']['amount'])) == Decimal('40')
        assert change['seat']['state'] == 'occupied'

        # When: the same seat is requested again
        conflict = client.post('/api/booking', json=_booking_payload(client, seat_number=21))

        # Then
        assert conflict.status_code == 409

        # When: an admin approves
        approved = client.post(f'/api/booking/{booking_id}/approve')
        assert approved.status_code == 200
        assert approved.json()['booking']['status'] == 'approved'
        assert client.post(f'/api/booking/{booking_id}/approve').status_code == 409

        # When: the payment provider calls back without and with the signature
        callback = {'booking_id': booking_id, 'reference': 'T123', 'success': True}
        assert client.post('/api/payment/callback', json=callback).status_code == 401
        paid = client.post(
            '/api/payment/callback',
            json=callback,
            headers={PAYMENT_SIGNATURE_HEADER: 'test_payment_webhook_secret'},
        )
        assert paid.status_code == 200
        assert paid.json()['payment_status'] == 'completed'

        # Then: the audit trail shows the approval
        actions = [a['action'] for a in client.get('/api/activity').json()]
        assert 'BOOKING_APPROVED' in actions
        assert 'LOGIN' in actions

    def test_cancel_releases_seat(self, logged_in_client: TestClient) -> None:
        client = logged_in_client
        booking_id = client.post(
            '/api/booking', json=_booking_payload(client, seat_number=22)
        ).json()['booking']['id']

        cancelled = client.post(f'/api/booking/{booking_id}/cancel')

        assert cancelled.status_code == 200
        assert cancelled.json()['seat']['state'] == 'available'
        seats = {s['seat_number']: s for s in client.get('/api/seat').json()['seats']}
        assert seats[22]['state'] == 'available'
        assert client.post(f'/api/booking/{booking_id}/cancel').status_code == 409

    def test_block_and_unblock_seat(self, logged_in_client: TestClient) -> None:
        client = logged_in_client

        blocked = client.patch('/api/seat/25', json={'blocked': True})
        booking = client.post('/api/booking', json=_booking_payload(client, seat_number=25))
        unblocked = client.patch('/api/seat/25', json={'blocked': False})

        assert blocked.json()['state'] == 'blocked'
        assert booking.status_code == 409
        assert unblocked.json()['state'] == 'available'

    def test_delete_and_export(self, logged_in_client: TestClient) -> None:
        client = logged_in_client
        booking_id = client.post(
            '/api/booking', json=_booking_payload(client, seat_number=26)
        ).json()['booking']['id']

        deleted = client.delete(f'/api/booking/{booking_id}')
        export = client.get('/api/booking/export')

        assert deleted.status_code == 200
        assert client.get(f'/api/booking/{booking_id}').status_code == 404
        assert export.status_code == 200
        assert export.headers['content-type'].startswith('text/csv')
        assert 'bookings_all_' in export.headers['content-disposition']
        assert booking_id not in export.text

    def test_logout_clears_session(self, logged_in_client: TestClient) -> None:
        client = logged_in_client

        assert client.get('/api/admin/me').status_code == 200
        assert client.post('/api/admin/logout').status_code == 204
        client.cookies.clear()
        assert client.get('/api/admin/me').status_code == 401
