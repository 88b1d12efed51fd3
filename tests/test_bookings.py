import logging

import pytest


async def _create_car(client, payload) -> dict:
    response = await client.post("/api/cars", json=payload)
    assert response.status_code == 201
    return response.json()["car"]


@pytest.mark.asyncio
async def test_create_booking_with_valid_car(client, car_payload, booking_payload):
    car = await _create_car(client, car_payload)

    response = await client.post("/api/bookings", json={**booking_payload, "carId": car["_id"]})

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Booking created successfully!"
    booking = body["booking"]
    assert booking["_id"]
    assert booking["carId"] == car["_id"]
    # The client-supplied snapshot is stored as sent.
    assert booking["carImage"] == booking_payload["carImage"]
    assert booking["rentalDays"] == 3
    assert booking["pickupLocation"] == booking_payload["pickupLocation"]


@pytest.mark.asyncio
async def test_create_booking_with_unknown_car_is_rejected(client, booking_payload):
    response = await client.post("/api/bookings", json={**booking_payload, "carId": "no-such-car"})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid carId: Car not found"}
    assert (await client.get("/api/bookings")).json() == []


@pytest.mark.asyncio
async def test_create_booking_without_car_id_is_rejected(client, booking_payload):
    response = await client.post("/api/bookings", json=booking_payload)

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid carId: Car not found"


@pytest.mark.asyncio
async def test_create_booking_missing_field_fails(client, car_payload, booking_payload):
    car = await _create_car(client, car_payload)
    del booking_payload["returnDate"]

    response = await client.post("/api/bookings", json={**booking_payload, "carId": car["_id"]})

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to create booking"
    assert (await client.get("/api/bookings")).json() == []


@pytest.mark.asyncio
async def test_list_bookings_newest_first(client, car_payload, booking_payload):
    car = await _create_car(client, car_payload)
    for first_name in ("First", "Second", "Third"):
        response = await client.post(
            "/api/bookings",
            json={**booking_payload, "carId": car["_id"], "firstName": first_name},
        )
        assert response.status_code == 201

    response = await client.get("/api/bookings")

    assert response.status_code == 200
    assert [b["firstName"] for b in response.json()] == ["Third", "Second", "First"]


@pytest.mark.asyncio
async def test_list_bookings_uses_current_car_image(client, car_payload, booking_payload):
    car = await _create_car(client, car_payload)
    await client.post("/api/bookings", json={**booking_payload, "carId": car["_id"]})
    new_image = "https://cdn.example.com/cars/corolla-2.jpg"
    await client.put(f"/api/cars/{car['_id']}", json={"imageUrl": new_image})

    bookings = (await client.get("/api/bookings")).json()

    assert len(bookings) == 1
    assert bookings[0]["carImage"] == new_image


@pytest.mark.asyncio
async def test_list_bookings_keeps_snapshot_when_car_deleted(client, car_payload, booking_payload):
    car = await _create_car(client, car_payload)
    await client.post("/api/bookings", json={**booking_payload, "carId": car["_id"]})
    assert (await client.delete(f"/api/cars/{car['_id']}")).status_code == 200

    response = await client.get("/api/bookings")

    assert response.status_code == 200
    bookings = response.json()
    assert len(bookings) == 1
    assert bookings[0]["carId"] == car["_id"]
    assert bookings[0]["carImage"] == booking_payload["carImage"]


@pytest.mark.asyncio
async def test_create_booking_does_not_log_customer_details(client, car_payload, booking_payload, caplog):
    car = await _create_car(client, car_payload)

    with caplog.at_level(logging.INFO, logger="rental_api.routers.bookings"):
        response = await client.post("/api/bookings", json={**booking_payload, "carId": car["_id"]})

    assert response.status_code == 201
    assert car["_id"] in caplog.text
    assert booking_payload["contactInfo"] not in caplog.text
    assert booking_payload["lastName"] not in caplog.text
