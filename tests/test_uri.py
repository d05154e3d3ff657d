import logging
import unittest

from uriparts.buffer import Buffer
from uriparts.exceptions import CapacityExceeded, InvalidURI
from uriparts.parts import Component
from uriparts.uri import *


class AbsoluteFormTests(unittest.TestCase):
    def test_parse_uri(self):
        parts = parse_uri("HTTP://user:pass@[::1]:8080/a%20b?q#f")
        self.assertEqual(
            (
                parts.scheme,
                parts.username,
                parts.password,
                parts.host,
                parts.port,
                parts.path,
                parts.query,
                parts.fragment,
            ),
            ("http", "user", "pass", "::1", "8080", "/a b", "q", "f"),
        )
        self.assertEqual(parts.present, set(Component))

    def test_parse_uri_is_absolute_form(self):
        self.assertIs(parse_uri, parse_absolute_form)

    def test_ipv6_literal(self):
        parts = parse_absolute_form("http://[::1]:80")
        self.assertEqual(parts.host, "::1")
        self.assertEqual(parts.port, "80")
        self.assertEqual(parts.port_number, 80)

    def test_effective_port(self):
        for uri, port in [
            ("http://h", 80),
            ("https://h", 443),
            ("ws://h:8000", 8000),
            ("x://h", None),
        ]:
            with self.subTest(uri=uri):
                self.assertEqual(parse_uri(uri).effective_port, port)

    def test_buffer(self):
        buffer = Buffer()
        parse_uri("ws://h/p", buffer)
        self.assertEqual(bytes(buffer), b"ws://h/p")

    def test_capacity(self):
        with self.assertRaises(CapacityExceeded):
            parse_uri("ws://example.com/", capacity=8)

    def test_non_ascii(self):
        with self.assertRaises(InvalidURI):
            parse_uri("ws://høst/")

    def test_origin_form_isnt_absolute_form(self):
        with self.assertRaises(InvalidURI):
            parse_absolute_form("/index.html")


class OriginFormTests(unittest.TestCase):
    def test_parse_valid_targets(self):
        for target, path, query in [
            ("/", "/", None),
            ("/index.html", "/index.html", None),
            ("/index.html?lang=en", "/index.html", "lang=en"),
            ("/a?", "/a", ""),
            ("//a", "//a", None),
            ("/a%20b?c%20d", "/a b", "c d"),
        ]:
            with self.subTest(target=target):
                parts = parse_origin_form(target)
                self.assertEqual(parts.path, path)
                self.assertEqual(parts.query, query or "")
                self.assertEqual(parts.has_query, query is not None)
                self.assertNotIn(Component.SCHEME, parts.present)
                self.assertNotIn(Component.HOST, parts.present)

    def test_parse_invalid_targets(self):
        for target in [
            "",
            "index.html",
            "?a",
            "*",
            "http://h/",
            "/a#b",
            "/a?b#c",
            "/a b",
            "/a\r\n",
        ]:
            with self.subTest(target=target):
                with self.assertRaises(InvalidURI):
                    parse_origin_form(target)


class AuthorityFormTests(unittest.TestCase):
    def test_parse_valid_targets(self):
        for target, username, password, host, port in [
            ("www.example.com:80", None, None, "www.example.com", "80"),
            ("www.example.com", None, None, "www.example.com", None),
            ("[::1]:8443", None, None, "::1", "8443"),
            ("user:pw@h:443", "user", "pw", "h", "443"),
        ]:
            with self.subTest(target=target):
                parts = parse_authority_form(target)
                self.assertEqual(parts.username, username or "")
                self.assertEqual(parts.password, password or "")
                self.assertEqual(parts.has_userinfo, username is not None)
                self.assertEqual(parts.host, host)
                self.assertEqual(parts.port, port or "")
                self.assertEqual(
                    parts.present - {Component.USERNAME, Component.PASSWORD},
                    {Component.HOST} | ({Component.PORT} if port else set()),
                )

    def test_parse_invalid_targets(self):
        for target in [
            "",
            ":80",
            "h:",
            "h:80:80",
            "h/path",
            "h:80/",
            "h?x",
            "h#x",
            "[::1]/",
            "a@b@c:80",
            "http://h:80",
        ]:
            with self.subTest(target=target):
                with self.assertRaises(InvalidURI):
                    parse_authority_form(target)


class AsteriskFormTests(unittest.TestCase):
    def test_parse_asterisk(self):
        parts = parse_asterisk_form("*")
        self.assertEqual(parts.path, "*")
        self.assertEqual(parts.present, {Component.PATH})

    def test_parse_invalid_targets(self):
        for target in ["", "**", "/", "*/", " *"]:
            with self.subTest(target=target):
                with self.assertRaises(InvalidURI):
                    parse_asterisk_form(target)

    def test_capacity(self):
        with self.assertRaises(CapacityExceeded):
            parse_asterisk_form("*", capacity=0)

    def test_capacity_clears_buffer(self):
        buffer = Buffer(0)
        with self.assertRaises(CapacityExceeded):
            parse_asterisk_form("*", buffer)
        self.assertEqual(len(buffer), 0)
        self.assertEqual(list(buffer), [])

    def test_log_success(self):
        with self.assertLogs("uriparts.parser", logging.DEBUG) as logs:
            parse_asterisk_form("*")
        self.assertEqual(
            logs.output,
            ["DEBUG:uriparts.parser:= Buffer(path=b'*')"],
        )

    def test_log_failure(self):
        with self.assertLogs("uriparts.parser", logging.DEBUG) as logs:
            with self.assertRaises(InvalidURI):
                parse_asterisk_form("**")
        self.assertEqual(
            logs.output,
            [
                "DEBUG:uriparts.parser:! ** isn't a valid URI: "
                "asterisk-form must be '*'"
            ],
        )

    def test_custom_logger(self):
        logger = logging.getLogger("test.asterisk")
        with self.assertLogs("test.asterisk", logging.DEBUG) as logs:
            parse_asterisk_form("*", logger=logger)
        self.assertEqual(len(logs.records), 1)


class RequestTargetTests(unittest.TestCase):
    def test_select_form(self):
        for method, target, present in [
            ("GET", "/a?b", {Component.PATH, Component.QUERY}),
            ("OPTIONS", "*", {Component.PATH}),
            ("OPTIONS", "/a", {Component.PATH}),
            ("CONNECT", "h:443", {Component.HOST, Component.PORT}),
            (
                "GET",
                "http://h/a",
                {Component.SCHEME, Component.HOST, Component.PATH},
            ),
            (
                "POST",
                b"http://h:80",
                {Component.SCHEME, Component.HOST, Component.PORT},
            ),
        ]:
            with self.subTest(method=method, target=target):
                parts = parse_request_target(target, method)
                self.assertEqual(parts.present, present)

    def test_invalid_targets(self):
        for method, target in [
            ("GET", "*"),
            ("GET", ""),
            ("CONNECT", "/a"),
            ("CONNECT", "http://h:443"),
            ("OPTIONS", "**"),
            ("GET", "/a#b"),
        ]:
            with self.subTest(method=method, target=target):
                with self.assertRaises(InvalidURI):
                    parse_request_target(target, method)
