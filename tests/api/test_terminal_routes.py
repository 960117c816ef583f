"""Integration tests for the /terminal endpoints."""


class TestExecuteEndpoint:
    """Test POST /terminal/execute."""

    def test_runs_command(self, client_with_session):
        client, _ = client_with_session

        response = client.post("/terminal/execute", json={"command": "pwd"})

        assert response.status_code == 200
        assert response.json() == {"output": "/", "new_directory": "", "clear": False}

    def test_mutates_shared_tree(self, client_with_session):
        client, session = client_with_session

        client.post("/terminal/execute", json={"command": "mkdir -p notes/daily"})
        client.post("/terminal/execute", json={"command": "echo hi > notes/daily/today.txt"})

        assert session.filesystem.read_file("notes/daily/today.txt") == "hi"

    def test_tracks_working_directory(self, client_with_session):
        client, session = client_with_session

        data = client.post("/terminal/execute", json={"command": "cd src"}).json()
        assert data["new_directory"] == "src"

        data = client.post("/terminal/execute", json={"command": "ls"}).json()
        assert data["output"] == "components/  services/  index.js  App.js  index.css"
        assert session.current_directory == "src"

    def test_explicit_directory_with_leading_slash(self, client_with_session):
        client, _ = client_with_session

        response = client.post(
            "/terminal/execute",
            json={"command": "ls", "current_directory": "/src/components/"},
        )

        assert response.json()["output"] == "ChatWindow.js  FileViewer.js  Terminal.js"
        assert response.json()["new_directory"] == "src/components"

    def test_command_errors_are_output(self, client_with_session):
        client, _ = client_with_session

        response = client.post("/terminal/execute", json={"command": "cd nowhere"})

        assert response.status_code == 200
        assert response.json()["output"] == "cd: nowhere: No such file or directory"

    def test_clear_returns_sentinel(self, client_with_session):
        client, _ = client_with_session

        response = client.post("/terminal/execute", json={"command": "clear"})

        assert response.json() == {
            "output": "CLEAR_TERMINAL",
            "new_directory": "",
            "clear": True,
        }

    def test_missing_command_is_rejected(self, client_with_session):
        client, _ = client_with_session

        response = client.post("/terminal/execute", json={})

        assert response.status_code == 422


class TestStateEndpoints:
    """Test GET /terminal/state, GET /terminal/history and POST /terminal/reset."""

    def test_state(self, client_with_session):
        client, session = client_with_session
        client.post("/terminal/execute", json={"command": "cd public"})

        data = client.get("/terminal/state").json()

        assert data["session_id"] == session.session_id
        assert data["current_directory"] == "public"
        assert data["directory_count"] == len(session.filesystem.directories)
        assert data["file_count"] == len(session.filesystem.files)
        assert data["history_length"] == 1
        assert data["validation_errors"] == []

    def test_history(self, client_with_session):
        client, _ = client_with_session
        client.post("/terminal/execute", json={"command": "cd src"})
        client.post("/terminal/execute", json={"command": "cat index.css"})

        data = client.get("/terminal/history").json()

        assert data["count"] == 2
        assert data["entries"][0] == {"command": "cd src", "directory": "", "output": ""}
        assert data["entries"][1]["directory"] == "src"
        assert data["entries"][1]["output"].startswith("body {")

    def test_reset(self, client_with_session):
        client, session = client_with_session
        client.post("/terminal/execute", json={"command": "rm -rf src"})
        client.post("/terminal/execute", json={"command": "cd public"})

        response = client.post("/terminal/reset")

        assert response.status_code == 200
        assert response.json()["message"] == "Terminal session reset"
        assert session.filesystem.directory_exists("src")
        assert session.current_directory == ""
        assert client.get("/terminal/history").json()["count"] == 0


class TestRootEndpoints:
    """Test GET / and GET /health."""

    def test_root(self, client_with_session):
        client, _ = client_with_session

        data = client.get("/").json()

        assert data["message"] == "Welcome to the Virtual Terminal Simulator API"
        assert data["docs_url"] == "/docs"

    def test_health(self, client_with_session):
        client, _ = client_with_session

        assert client.get("/health").json() == {"status": "healthy"}
