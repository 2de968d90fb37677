import re
import unittest

from ecatconf.scraping import LineRule, scrape


class TestScrape(unittest.TestCase):
    def test_first_matching_rule_wins(self):
        calls = []
        rules = [
            LineRule(re.compile(r'^SM([0-9]+)'), lambda m: calls.append(('sm', m[1]))),
            LineRule(re.compile(r'^S'), lambda m: calls.append(('s', m[0]))),
        ]

        scrape('SM2: PhysAddr 0x1100\nSomething else', rules)

        self.assertEqual(calls, [('sm', '2'), ('s', 'S')])

    def test_unmatched_lines_are_ignored(self):
        calls = []
        rules = [LineRule(re.compile(r'^  PDO'), calls.append)]

        matched = scrape('foo\n\n  bar\n  PDO entry', rules)

        self.assertEqual(matched, 1)
        self.assertEqual(len(calls), 1)

    def test_empty_text(self):
        self.assertEqual(scrape('', [LineRule(re.compile('.*'), print)]), 0)


if __name__ == '__main__':
    unittest.main()
