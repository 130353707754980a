"""Tests for coordinate value types."""

import pytest

from hexmap.abstractions.types import LatLng, LngLat, Positioned, GeoPoint, MockPointSet


class TestAxisOrderTypes:
    """LatLng and LngLat keep their axis order explicit."""

    def test_latlng_fields(self):
        point = LatLng(39.9, 116.4)
        assert point.lat == 39.9
        assert point.lng == 116.4
        assert point == (39.9, 116.4)

    def test_lnglat_fields(self):
        point = LngLat(116.4, 39.9)
        assert point.lng == 116.4
        assert point.lat == 39.9
        assert point == (116.4, 39.9)

    def test_swap_round_trip(self):
        point = LatLng(39.9, 116.4)
        swapped = point.swap()
        assert isinstance(swapped, LngLat)
        assert swapped == (116.4, 39.9)
        assert swapped.swap() == point

    def test_immutable(self):
        point = LatLng(1.0, 2.0)
        with pytest.raises(AttributeError):
            point.lat = 3.0


class TestPositioned:
    """Positioned accepts anything with get_lat/get_lng."""

    def test_geopoint_is_positioned(self):
        corner = GeoPoint(40.0, 117.0)
        assert isinstance(corner, Positioned)
        assert corner.get_lat() == 40.0
        assert corner.get_lng() == 117.0

    def test_duck_typed_object_is_positioned(self, duck_corner):
        assert isinstance(duck_corner(1.0, 2.0), Positioned)

    def test_object_without_accessors_is_not_positioned(self):
        assert not isinstance((40.0, 117.0), Positioned)
        assert not isinstance(LatLng(40.0, 117.0), Positioned)

    def test_cannot_instantiate_interface(self):
        with pytest.raises(TypeError):
            Positioned()

    def test_parse(self):
        assert GeoPoint.parse("40.5, 117.25") == GeoPoint(40.5, 117.25)
        assert GeoPoint.parse("39,116").to_latlng() == LatLng(39.0, 116.0)

    @pytest.mark.parametrize("text", ["40", "1,2,3", "north,east"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError):
            GeoPoint.parse(text)


class TestMockPointSet:
    """MockPointSet defaults and serialisation."""

    def test_defaults(self):
        point_set = MockPointSet(cell_id='872830828ffffff', count=0)
        assert point_set.points == []
        assert point_set.selected is False

    def test_to_dict(self):
        point_set = MockPointSet(
            cell_id='872830828ffffff',
            count=2,
            points=[LngLat(116.4, 39.9), LngLat(116.5, 39.8)]
        )
        assert point_set.to_dict() == {
            'cell_id': '872830828ffffff',
            'count': 2,
            'points': [[116.4, 39.9], [116.5, 39.8]],
            'selected': False
        }

    def test_selected_is_caller_mutable(self):
        point_set = MockPointSet(cell_id='872830828ffffff', count=0)
        point_set.selected = True
        assert point_set.to_dict()['selected'] is True
