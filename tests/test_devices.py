"""Tests for device management, state control and luminance snapping."""

from tests.support import ApiTestCase

import unittest

from pydantic import ValidationError

from versex.models import Device, Log
from versex.schemas.devices import (
    LUMINANCE_DEFAULT,
    DeviceStateRequest,
    NewDeviceRequest,
    snap_luminance,
)


class TestSnapLuminance(unittest.TestCase):
    """snap_luminance rounds to slider steps of 0.1 within [0, 1]."""

    def test_rounds_to_nearest_step(self) -> None:
        self.assertEqual(snap_luminance(0.73), 0.7)
        self.assertEqual(snap_luminance(0.76), 0.8)
        self.assertEqual(snap_luminance(0.3), 0.3)

    def test_halfway_values_round_up(self) -> None:
        self.assertEqual(snap_luminance(0.25), 0.3)
        self.assertEqual(snap_luminance(0.65), 0.7)
        self.assertEqual(snap_luminance(0.05), 0.1)

    def test_bounds_kept(self) -> None:
        self.assertEqual(snap_luminance(0.0), 0.0)
        self.assertEqual(snap_luminance(1.0), 1.0)

    def test_default_is_half_of_maximum(self) -> None:
        self.assertEqual(LUMINANCE_DEFAULT, 0.5)
        self.assertEqual(NewDeviceRequest(name="Lamp", kind="light").luminance, 0.5)

    def test_out_of_range_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            DeviceStateRequest(luminance=1.2)
        with self.assertRaises(ValidationError):
            DeviceStateRequest(luminance=-0.1)


class TestDeviceApi(ApiTestCase):

    def create(self, **kwargs: object) -> dict:
        body: dict[str, object] = {"name": "Ceiling lamp", "kind": "light", "room": "Living room"}
        body.update(kwargs)
        r = self.client.post(self.url("/devices"), json=body)
        self.assertEqual(r.status_code, 201, r.text)
        return r.json()

    def test_empty_list_returns_204(self) -> None:
        self.assertEqual(self.client.get(self.url("/devices")).status_code, 204)

    def test_create_and_list(self) -> None:
        created = self.create()
        self.assertFalse(created["is_on"])
        self.assertEqual(created["luminance"], 0.5)
        r = self.client.get(self.url("/devices"))
        self.assertEqual(r.status_code, 200)
        self.assertEqual([d["name"] for d in r.json()["devices"]], ["Ceiling lamp"])

    def test_duplicate_name_returns_400(self) -> None:
        self.create()
        r = self.client.post(self.url("/devices"), json={"name": "Ceiling lamp", "kind": "switch"})
        self.assertEqual(r.status_code, 400)

    def test_unknown_kind_is_shape_error(self) -> None:
        r = self.client.post(self.url("/devices"), json={"name": "Toaster", "kind": "toaster"})
        self.assertEqual(r.status_code, 422)

    def test_set_state_snaps_luminance_and_logs(self) -> None:
        device = self.create()
        r = self.client.put(
            self.url(f"/devices/{device['id']}/state"), json={"is_on": True, "luminance": 0.73}
        )
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.json()["is_on"])
        self.assertEqual(r.json()["luminance"], 0.7)
        with self.session_factory() as db:
            last = db.query(Log).order_by(Log.id.desc()).first()
            self.assertEqual(last.message, "Set device Ceiling lamp on, luminance 0.7!")

    def test_luminance_on_switch_returns_400(self) -> None:
        device = self.create(name="Fan", kind="switch")
        r = self.client.put(self.url(f"/devices/{device['id']}/state"), json={"luminance": 0.2})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["detail"], "Luminance can only be set on light devices!")

    def test_luminance_on_switch_create_returns_400(self) -> None:
        r = self.client.post(
            self.url("/devices"), json={"name": "Fan", "kind": "switch", "luminance": 0.8}
        )
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["detail"], "Luminance can only be set on light devices!")
        with self.session_factory() as db:
            self.assertEqual(db.query(Device).count(), 0)

    def test_switch_created_with_default_luminance(self) -> None:
        device = self.create(name="Fan", kind="switch")
        self.assertEqual(device["luminance"], 0.5)

    def test_update_light_to_switch_resets_luminance(self) -> None:
        device = self.create()
        self.client.put(self.url(f"/devices/{device['id']}/state"), json={"luminance": 0.9})
        r = self.client.put(
            self.url(f"/devices/{device['id']}"),
            json={"name": "Ceiling fan", "kind": "switch", "room": "Living room"},
        )
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["kind"], "switch")
        self.assertEqual(r.json()["luminance"], 0.5)

    def test_luminance_out_of_range_returns_422(self) -> None:
        device = self.create()
        r = self.client.put(self.url(f"/devices/{device['id']}/state"), json={"luminance": 1.5})
        self.assertEqual(r.status_code, 422)

    def test_update_device(self) -> None:
        device = self.create()
        r = self.client.put(
            self.url(f"/devices/{device['id']}"),
            json={"name": "Desk lamp", "kind": "light", "room": "Office"},
        )
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["room"], "Office")

    def test_delete_device(self) -> None:
        device = self.create()
        r = self.client.delete(self.url(f"/devices/{device['id']}"))
        self.assertEqual(r.status_code, 204)
        with self.session_factory() as db:
            self.assertEqual(db.query(Device).count(), 0)

    def test_bad_and_missing_ids_return_400(self) -> None:
        self.assertEqual(self.client.get(self.url("/devices/lamp")).status_code, 400)
        r = self.client.get(self.url("/devices/77"))
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["detail"], "No such device in database!")


if __name__ == "__main__":
    unittest.main()
