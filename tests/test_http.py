import os
import tempfile
import unittest

from pathfinder.config import ServerConfig
from pathfinder.web.app import create_app
from pathfinder.web.errors import status_for
from pathfinder.domain.errors import ErrorCode, NotFoundError

OPEN_3X3 = [[0, 0, 0], [0, 0, 0], [0, 0, 0]]


def simulate_body(**overrides):
    body = {
        "algorithm": "bfs",
        "grid": OPEN_3X3,
        "start": {"x": 0, "y": 0},
        "goal": {"x": 2, "y": 2},
    }
    body.update(overrides)
    return body


class ApiTestCase(unittest.TestCase):
    config = ServerConfig()

    def setUp(self) -> None:
        self.app = create_app(self.config)
        self.app.testing = True
        self.client = self.app.test_client()


class HealthTests(ApiTestCase):
    def test_healthz(self) -> None:
        response = self.client.get("/healthz")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"status": "ok"})


class GenerateMazeRouteTests(ApiTestCase):
    def test_generate_with_seed(self) -> None:
        response = self.client.post("/maze/generate", json={"width": 5, "height": 4, "seed": 7})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["width"], 11)
        self.assertEqual(data["height"], 9)
        self.assertEqual(len(data["grid"]), 9)
        self.assertEqual(len(data["grid"][0]), 11)
        self.assertEqual(data["seed"], 7)

    def test_same_seed_same_response(self) -> None:
        body = {"width": 6, "height": 6, "seed": 123}
        first = self.client.post("/maze/generate", json=body).get_json()
        second = self.client.post("/maze/generate", json=body).get_json()
        self.assertEqual(first, second)

    def test_seed_omitted(self) -> None:
        data = self.client.post("/maze/generate", json={"width": 3, "height": 3}).get_json()
        self.assertNotIn("seed", data)

    def test_missing_fields(self) -> None:
        response = self.client.post("/maze/generate", json={"height": 5})
        self.assertEqual(response.status_code, 400)
        data = response.get_json()
        self.assertEqual(data["error"], "validation failed")
        self.assertEqual(data["details"], {"width": "width is required"})

    def test_wrong_types(self) -> None:
        response = self.client.post("/maze/generate",
                                    json={"width": "5", "height": True, "seed": 1.5})
        self.assertEqual(response.status_code, 400)
        details = response.get_json()["details"]
        self.assertEqual(details["width"], "width must be an integer")
        self.assertEqual(details["height"], "height must be an integer")
        self.assertEqual(details["seed"], "seed must be an integer")

    def test_dimensions_out_of_range(self) -> None:
        for width, height in [(1, 5), (5, 1), (101, 5), (0, 0)]:
            with self.subTest(size=(width, height)):
                response = self.client.post("/maze/generate", json={"width": width, "height": height})
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json()["code"], "INVALID_DIMENSIONS")

    def test_malformed_json(self) -> None:
        response = self.client.post("/maze/generate", data="{not json",
                                    content_type="application/json")
        self.assertEqual(response.status_code, 400)
        self.assertIn("body", response.get_json()["details"])

    def test_body_must_be_object(self) -> None:
        response = self.client.post("/maze/generate", json=[1, 2])
        self.assertEqual(response.status_code, 400)


class SimulateRouteTests(ApiTestCase):
    def test_path_found(self) -> None:
        response = self.client.post("/simulate", json=simulate_body())
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertTrue(data["found"])
        self.assertEqual(data["path"], [{"x": 0, "y": 0}, {"x": 1, "y": 0}, {"x": 2, "y": 0},
                                        {"x": 2, "y": 1}, {"x": 2, "y": 2}])
        self.assertEqual(len(data["visitedOrder"]), 9)
        self.assertEqual(data["stats"]["expandedNodes"], 9)
        self.assertEqual(data["stats"]["pathLength"], 4)
        self.assertGreaterEqual(data["stats"]["elapsedMs"], 0)

    def test_algorithm_names(self) -> None:
        for name in ["bfs", "dfs", "astar", "A*", "ASTAR"]:
            with self.subTest(algorithm=name):
                response = self.client.post("/simulate", json=simulate_body(algorithm=name))
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.get_json()["stats"]["pathLength"], 4)

    def test_no_path_is_422(self) -> None:
        grid = [[0, 1, 0], [0, 1, 0], [0, 1, 0]]
        response = self.client.post("/simulate", json=simulate_body(grid=grid))
        self.assertEqual(response.status_code, 422)
        data = response.get_json()
        self.assertFalse(data["found"])
        self.assertEqual(data["path"], [])
        self.assertEqual(data["stats"]["pathLength"], 0)
        self.assertEqual(data["stats"]["expandedNodes"], 3)

    def test_field_validation(self) -> None:
        response = self.client.post("/simulate", json={})
        self.assertEqual(response.status_code, 400)
        details = response.get_json()["details"]
        self.assertEqual(set(details), {"algorithm", "grid", "start", "goal"})
        self.assertEqual(details["grid"], "grid is required")

    def test_bad_shapes(self) -> None:
        cases = [
            ("grid", simulate_body(grid=[]), "grid must have at least 1 row"),
            ("grid", simulate_body(grid=[[0, "x"]]), "grid must be a list of rows of integers"),
            ("start", simulate_body(start={"x": 0}), "start must be an object with integer x and y"),
            ("goal", simulate_body(goal=[2, 2]), "goal must be an object with integer x and y"),
        ]
        for field, body, message in cases:
            with self.subTest(field=field, message=message):
                response = self.client.post("/simulate", json=body)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json()["details"][field], message)

    def test_domain_errors(self) -> None:
        cases = [
            (simulate_body(algorithm="dijkstra"), "UNKNOWN_ALGORITHM"),
            (simulate_body(goal={"x": 5, "y": 0}), "OUT_OF_BOUNDS"),
            (simulate_body(start={"x": -1, "y": 0}), "OUT_OF_BOUNDS"),
            (simulate_body(grid=[[1, 0], [0, 0]], goal={"x": 1, "y": 1}), "BLOCKED"),
            (simulate_body(grid=[[0, 0], [0]]), "VALIDATION_ERROR"),
            (simulate_body(grid=[[0, 3], [0, 0]]), "VALIDATION_ERROR"),
        ]
        for body, code in cases:
            with self.subTest(code=code, body=body):
                response = self.client.post("/simulate", json=body)
                self.assertEqual(response.status_code, 400)
                data = response.get_json()
                self.assertEqual(data["code"], code)
                self.assertIn("message", data)


class ErrorMappingTests(ApiTestCase):
    def test_status_codes(self) -> None:
        self.assertEqual(status_for(ErrorCode.VALIDATION), 400)
        self.assertEqual(status_for(ErrorCode.NOT_FOUND), 404)
        self.assertEqual(status_for(ErrorCode.INTERNAL), 500)

    def test_not_found_error_response(self) -> None:
        service = self.app.extensions["pathfinder.maze_service"]

        def missing(*args, **kwargs):
            raise NotFoundError(details="no such maze")

        service.generate_maze = missing
        response = self.client.post("/maze/generate", json={"width": 3, "height": 3})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(),
                         {"code": "NOT_FOUND", "message": "not found", "details": "no such maze"})

    def test_unexpected_errors_are_hidden(self) -> None:
        service = self.app.extensions["pathfinder.simulation_service"]

        def explode(*args, **kwargs):
            raise RuntimeError("secret")

        service.run_simulation = explode
        with self.assertLogs("pathfinder.web.errors", level="ERROR"):
            response = self.client.post("/simulate", json=simulate_body())
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json()["code"], "INTERNAL_ERROR")
        self.assertNotIn("secret", response.get_data(as_text=True))

    def test_wrong_method(self) -> None:
        response = self.client.put("/simulate", json=simulate_body())
        self.assertEqual(response.status_code, 405)

    def test_unknown_path_without_frontend(self) -> None:
        response = self.client.get("/no/such/page")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {"error": "not found"})


class CorsTests(unittest.TestCase):
    def test_cors_only_in_dev(self) -> None:
        headers = {"Origin": "http://localhost:5173"}

        dev = create_app(ServerConfig(dev=True)).test_client()
        response = dev.get("/healthz", headers=headers)
        self.assertIn("Access-Control-Allow-Origin", response.headers)

        prod = create_app(ServerConfig(dev=False)).test_client()
        response = prod.get("/healthz", headers=headers)
        self.assertNotIn("Access-Control-Allow-Origin", response.headers)


class FrontendTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        with open(os.path.join(self.tmp.name, "index.html"), "w") as f:
            f.write("<html>pathfinder</html>")
        with open(os.path.join(self.tmp.name, "app.js"), "w") as f:
            f.write("console.log('hi');")
        self.client = create_app(ServerConfig(static_dir=self.tmp.name)).test_client()

    def test_index(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("pathfinder", response.get_data(as_text=True))
        response.close()

    def test_asset(self) -> None:
        response = self.client.get("/app.js")
        self.assertEqual(response.status_code, 200)
        self.assertIn("console.log", response.get_data(as_text=True))
        response.close()

    def test_unknown_route_falls_back_to_index(self) -> None:
        response = self.client.get("/mazes/42")
        self.assertEqual(response.status_code, 200)
        self.assertIn("pathfinder", response.get_data(as_text=True))
        response.close()

    def test_api_routes_take_precedence(self) -> None:
        self.assertEqual(self.client.get("/healthz").get_json(), {"status": "ok"})

    def test_missing_index_disables_frontend(self) -> None:
        with tempfile.TemporaryDirectory() as empty:
            client = create_app(ServerConfig(static_dir=empty)).test_client()
            self.assertEqual(client.get("/").status_code, 404)


if __name__ == "__main__":
    unittest.main()
