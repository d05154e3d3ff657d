import unittest

from uriparts.scheme import *


class SchemeTests(unittest.TestCase):
    def test_normalize_scheme(self):
        for scheme, normalized in [
            ("http", ("http", Scheme.HTTP)),
            ("HTTP", ("http", Scheme.HTTP)),
            ("Https", ("https", Scheme.HTTPS)),
            ("ws", ("ws", Scheme.WS)),
            ("WSS", ("wss", Scheme.WSS)),
            ("ftp", ("ftp", Scheme.FTP)),
            ("File", ("file", Scheme.FILE)),
            ("gopher", ("gopher", Scheme.GOPHER)),
            ("a", ("a", Scheme.UNKNOWN)),
            ("Svn+SSH", ("svn+ssh", Scheme.UNKNOWN)),
            ("", ("", Scheme.UNKNOWN)),
        ]:
            with self.subTest(scheme=scheme):
                self.assertEqual(normalize_scheme(scheme), normalized)

    def test_normalize_scheme_ascii_only(self):
        # Only ASCII letters are case-folded.
        self.assertEqual(normalize_scheme("HTTPÉ"), ("httpÉ", Scheme.UNKNOWN))

    def test_string_to_scheme(self):
        self.assertIs(string_to_scheme("wS"), Scheme.WS)
        self.assertIs(string_to_scheme("unknown"), Scheme.UNKNOWN)
        self.assertIs(string_to_scheme(""), Scheme.UNKNOWN)

    def test_is_special(self):
        for scheme in Scheme:
            with self.subTest(scheme=scheme):
                self.assertEqual(scheme.is_special, scheme is not Scheme.UNKNOWN)

    def test_default_port(self):
        for scheme, port in [
            (Scheme.UNKNOWN, None),
            (Scheme.FTP, 21),
            (Scheme.FILE, None),
            (Scheme.GOPHER, 70),
            (Scheme.HTTP, 80),
            (Scheme.HTTPS, 443),
            (Scheme.WS, 80),
            (Scheme.WSS, 443),
        ]:
            with self.subTest(scheme=scheme):
                self.assertEqual(scheme.default_port, port)
