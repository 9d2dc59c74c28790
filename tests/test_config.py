import unittest

from pathfinder.__main__ import build_parser, config_from_args
from pathfinder.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    MAX_DIMENSION,
    ServerConfig,
    parse_addr,
)


class ParseAddrTests(unittest.TestCase):
    def test_host_and_port(self) -> None:
        self.assertEqual(parse_addr("127.0.0.1:9000"), ("127.0.0.1", 9000))

    def test_port_only(self) -> None:
        self.assertEqual(parse_addr(":8080"), (DEFAULT_HOST, 8080))

    def test_invalid(self) -> None:
        for addr in ["8080", "localhost:", "localhost:http", ""]:
            with self.subTest(addr=addr):
                with self.assertRaises(ValueError):
                    parse_addr(addr)


class ServerConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = ServerConfig.from_env({})
        self.assertEqual(config.addr, f"{DEFAULT_HOST}:{DEFAULT_PORT}")
        self.assertFalse(config.dev)
        self.assertIsNone(config.static_dir)
        self.assertEqual(config.max_dimension, MAX_DIMENSION)

    def test_from_env(self) -> None:
        config = ServerConfig.from_env({
            "PATHFINDER_ADDR": ":9090",
            "PATHFINDER_DEV": "true",
            "PATHFINDER_STATIC_DIR": "/srv/web",
            "PATHFINDER_MAX_DIMENSION": "50",
            "PATHFINDER_MAX_GRID_CELLS": "1000",
            "PATHFINDER_LOG_LEVEL": "debug",
        })
        self.assertEqual(config.port, 9090)
        self.assertTrue(config.dev)
        self.assertEqual(config.static_dir, "/srv/web")
        self.assertEqual(config.max_dimension, 50)
        self.assertEqual(config.max_grid_cells, 1000)
        self.assertEqual(config.log_level, "DEBUG")

    def test_dev_flag_values(self) -> None:
        for value, expected in [("1", True), ("yes", True), ("ON", True), ("0", False), ("no", False)]:
            with self.subTest(value=value):
                self.assertEqual(ServerConfig.from_env({"PATHFINDER_DEV": value}).dev, expected)

    def test_to_flask(self) -> None:
        mapping = ServerConfig(port=1234).to_flask()
        self.assertEqual(mapping["PATHFINDER_PORT"], 1234)
        self.assertIn("PATHFINDER_MAX_GRID_CELLS", mapping)


class CommandLineTests(unittest.TestCase):
    def test_flags_override_defaults(self) -> None:
        args = build_parser().parse_args(
            ["serve", "--addr", "localhost:7000", "--dev", "--log-level", "warning"]
        )
        config = config_from_args(args)
        self.assertEqual((config.host, config.port), ("localhost", 7000))
        self.assertTrue(config.dev)
        self.assertEqual(config.log_level, "WARNING")

    def test_bad_addr(self) -> None:
        args = build_parser().parse_args(["serve", "--addr", "nope"])
        with self.assertRaises(ValueError):
            config_from_args(args)


if __name__ == "__main__":
    unittest.main()
