import unittest
from types import SimpleNamespace
from unittest.mock import Mock

import requests

from freeeats.core.exceptions import ExternalServiceError
from freeeats.services.geocoding import GeocodingService
from tests.helpers import make_settings

CAMPUS = SimpleNamespace(latitude=42.36, longitude=-71.09)


class TestGeocodingService(unittest.TestCase):

    def setUp(self):
        self.session = Mock(spec=requests.Session)
        self.response = Mock()
        self.response.json.return_value = [
            {"display_name": "77 Massachusetts Ave, Cambridge", "lat": "42.359", "lon": "-71.093"},
            {"display_name": "No coordinates"},
        ]
        self.session.get.return_value = self.response
        self.config = make_settings(GEOCODING_VIEWBOX_DELTA=0.1, GEOCODING_LIMIT=5)
        self.service = GeocodingService(self.config, session=self.session)

    def test_short_queries_skip_the_network(self):
        self.assertEqual(self.service.search_address(CAMPUS, "77"), [])
        self.assertEqual(self.service.search_address(CAMPUS, "  ab  "), [])
        self.session.get.assert_not_called()

    def test_search_is_biased_to_campus(self):
        results = self.service.search_address(CAMPUS, "77 Mass Ave")

        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].display_name, "77 Massachusetts Ave, Cambridge")
        self.assertEqual(results[0].lat, "42.359")

        kwargs = self.session.get.call_args.kwargs
        params = kwargs["params"]
        self.assertEqual(params["q"], "77 Mass Ave")
        self.assertEqual(params["format"], "json")
        self.assertEqual(params["limit"], 5)
        self.assertEqual(params["bounded"], 0)
        west, north, east, south = (float(v) for v in params["viewbox"].split(","))
        self.assertAlmostEqual(west, -71.19)
        self.assertAlmostEqual(north, 42.46)
        self.assertAlmostEqual(east, -70.99)
        self.assertAlmostEqual(south, 42.26)
        self.assertIn("User-Agent", kwargs["headers"])

    def test_suggestions_keep_geocoder_field_names(self):
        [result] = self.service.search_address(CAMPUS, "77 Mass Ave")
        self.assertEqual(
            result.model_dump(by_alias=True),
            {"display_name": "77 Massachusetts Ave, Cambridge", "lat": "42.359", "lon": "-71.093"},
        )

    def test_transport_error(self):
        self.session.get.side_effect = requests.exceptions.ConnectionError("down")
        with self.assertRaises(ExternalServiceError):
            self.service.search_address(CAMPUS, "77 Mass Ave")

    def test_http_error(self):
        self.response.raise_for_status.side_effect = requests.exceptions.HTTPError("503")
        with self.assertRaises(ExternalServiceError):
            self.service.search_address(CAMPUS, "77 Mass Ave")

    def test_invalid_json(self):
        self.response.json.side_effect = ValueError("not json")
        with self.assertRaises(ExternalServiceError):
            self.service.search_address(CAMPUS, "77 Mass Ave")

    def test_error_object_instead_of_results(self):
        self.response.json.return_value = {"error": "Unable to geocode"}
        with self.assertRaises(ExternalServiceError):
            self.service.search_address(CAMPUS, "77 Mass Ave")

    def test_malformed_entries_are_skipped(self):
        self.response.json.return_value = [
            "not an object",
            {"display_name": "Kresge Auditorium", "lat": "42.358", "lon": "-71.094"},
        ]
        results = self.service.search_address(CAMPUS, "Kresge")
        self.assertEqual([r.display_name for r in results], ["Kresge Auditorium"])


if __name__ == "__main__":
    unittest.main()
