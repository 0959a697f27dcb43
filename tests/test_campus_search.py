"""
Unit tests for campus search
Run with: python -m pytest tests/test_campus_search.py
"""

import unittest
from types import SimpleNamespace

from freeeats.db.campus_data import CAMPUSES
from freeeats.services.campus.campus_search import MAX_RESULTS, field_similarity, search_campuses


def _campus(name, city, state, lat=0.0, lng=0.0):
    return SimpleNamespace(name=name, city=city, state=state, latitude=lat, longitude=lng)


DIRECTORY = [_campus(*row) for row in CAMPUSES]


class TestFieldSimilarity(unittest.TestCase):

    def test_substring_scores_one(self):
        self.assertEqual(field_similarity("mit", "mit"), 1.0)
        self.assertEqual(field_similarity("tech", "georgia tech"), 1.0)

    def test_single_character_runs_are_ignored(self):
        self.assertEqual(field_similarity("xyz", "xaybzc"), 0.0)

    def test_typo_keeps_partial_credit(self):
        score = field_similarity("stanfrod", "stanford university")
        self.assertGreaterEqual(score, 0.6)
        self.assertLess(score, 1.0)

    def test_empty_inputs(self):
        self.assertEqual(field_similarity("", "abc"), 0.0)
        self.assertEqual(field_similarity("abc", ""), 0.0)


class TestSearchCampuses(unittest.TestCase):

    def test_mit_ranks_first(self):
        results = search_campuses(DIRECTORY, "MIT")
        self.assertTrue(results)
        self.assertEqual(results[0].name, "MIT")

    def test_blank_query_returns_nothing(self):
        self.assertEqual(search_campuses(DIRECTORY, ""), [])
        self.assertEqual(search_campuses(DIRECTORY, "   "), [])
        self.assertEqual(search_campuses(DIRECTORY, None), [])

    def test_nonsense_query_returns_nothing(self):
        self.assertEqual(search_campuses(DIRECTORY, "zz-no-such-school"), [])

    def test_results_are_capped(self):
        results = search_campuses(DIRECTORY, "a")
        self.assertEqual(len(results), MAX_RESULTS)

    def test_limit_never_exceeds_cap(self):
        self.assertEqual(len(search_campuses(DIRECTORY, "a", limit=500)), MAX_RESULTS)
        self.assertEqual(len(search_campuses(DIRECTORY, "a", limit=5)), 5)

    def test_short_query_matches_state_code(self):
        results = search_campuses(DIRECTORY, "ma")
        names = [c.name for c in results]
        self.assertIn("MIT", names)
        for campus in results:
            self.assertTrue("ma" in campus.name.lower() or campus.state == "MA")

    def test_short_query_puts_prefix_matches_first(self):
        campuses = [
            _campus("Zeta College", "Nowhere", "MA"),
            _campus("Alabama State University", "Montgomery", "AL"),
            _campus("Mason University", "Fairfax", "VA"),
            _campus("Marist College", "Poughkeepsie", "NY"),
        ]
        names = [c.name for c in search_campuses(campuses, "Ma")]
        self.assertEqual(names, [
            "Marist College",
            "Mason University",
            "Alabama State University",
            "Zeta College",
        ])

    def test_fuzzy_query_tolerates_typos(self):
        campuses = [
            _campus("Stanford University", "Stanford", "CA"),
            _campus("Stetson University", "DeLand", "FL"),
            _campus("Harvard University", "Cambridge", "MA"),
        ]
        results = search_campuses(campuses, "stanfrod")
        self.assertEqual([c.name for c in results], ["Stanford University"])

    def test_city_match_is_found(self):
        campuses = [
            _campus("Boston University", "Boston", "MA"),
            _campus("Tufts University", "Medford", "MA"),
        ]
        results = search_campuses(campuses, "medford")
        self.assertEqual([c.name for c in results], ["Tufts University"])

    def test_name_weighs_more_than_city(self):
        campuses = [
            _campus("Springfield College", "Springfield", "MA"),
            _campus("Drury University", "Springfield", "MO"),
        ]
        results = search_campuses(campuses, "springfield")
        self.assertEqual(results[0].name, "Springfield College")
        self.assertEqual(len(results), 2)

    def test_exact_name_wins_ties(self):
        campuses = [
            _campus("Rice University", "Houston", "TX"),
            _campus("Rice", "Houston", "TX"),
        ]
        results = search_campuses(campuses, "rice")
        self.assertEqual(results[0].name, "Rice")


if __name__ == "__main__":
    unittest.main()
