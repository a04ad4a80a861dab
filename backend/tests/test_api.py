"""
HTTP-level tests for the student portal endpoints.
"""
import httpx
from bson import Decimal128
from pymongo.errors import ServerSelectionTimeoutError

from services.portal.auth import INVALID_CREDENTIALS_MESSAGE
from services.portal.chat import DEFAULT_REGULATIONS_CONTENT, REGULATIONS_TYPE


class TestConnectionCheck:
    """GET /test-mongo-connection"""

    def test_reports_student_count(self, client, database):
        """The message embeds the number of stored students."""
        database.student_docs.extend([{"codigo_estudiante": "C2"}, {"codigo_estudiante": "C3"}])

        response = client.get("/test-mongo-connection")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "¡Conexión exitosa! La colección 'estudiantes' tiene 3 documentos."

    def test_repeated_checks_are_identical(self, client):
        first = client.get("/test-mongo-connection")
        second = client.get("/test-mongo-connection")

        assert first.status_code == second.status_code == 200
        assert first.text == second.text

    def test_store_failure_returns_problem(self, client, database):
        """Store faults become a 500 carrying the fault text."""
        database.fail_with = ServerSelectionTimeoutError("localhost:27017: connection refused")

        response = client.get("/test-mongo-connection")

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/problem+json")
        body = response.json()
        assert body["status"] == 500
        assert body["detail"].startswith("Error al conectar con MongoDB: ")
        assert "connection refused" in body["detail"]


class TestLogin:
    """POST /api/auth/login"""

    def test_valid_credentials_return_full_student(self, client):
        response = client.post("/api/auth/login", json={"codigoEstudiante": "C1", "password": "p1"})

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "65f0c0ffee00000000000001"
        assert body["codigo_estudiante"] == "C1"
        assert body["password_hash"] == "p1"
        assert body["nombre_completo"] == "Ana Torres"
        assert body["promedio_ponderado"] == 15.4
        assert body["asesor"] == {"nombre": "Luis Rojas", "correo": "lrojas@uni.edu.pe"}
        assert [c["codigo"] for c in body["cursos_inscritos"]] == ["MA202", "IS101"]

    def test_wrong_password_and_unknown_code_look_the_same(self, client):
        """Both failures give 401 with identical text."""
        wrong_password = client.post("/api/auth/login", json={"codigoEstudiante": "C1", "password": "nope"})
        unknown_code = client.post("/api/auth/login", json={"codigoEstudiante": "X9", "password": "p1"})

        assert wrong_password.status_code == 401
        assert unknown_code.status_code == 401
        assert wrong_password.json() == unknown_code.json()
        assert wrong_password.json()["detail"] == INVALID_CREDENTIALS_MESSAGE

    def test_repeated_login_is_identical(self, client):
        payload = {"codigoEstudiante": "C1", "password": "p1"}

        assert client.post("/api/auth/login", json=payload).json() == \
            client.post("/api/auth/login", json=payload).json()

    def test_student_with_null_and_missing_fields(self, client, database):
        """Sparse stored records are served with nulls instead of failing."""
        database.student_docs.append({
            "codigo_estudiante": "C7",
            "password_hash": "p7",
            "cursos_inscritos": None,
            "promedio_ponderado": None,
        })

        response = client.post("/api/auth/login", json={"codigoEstudiante": "C7", "password": "p7"})

        assert response.status_code == 200
        body = response.json()
        assert body["codigo_estudiante"] == "C7"
        assert body["cursos_inscritos"] is None
        assert body["promedio_ponderado"] is None
        assert body["asesor"] is None
        assert body["nombre_completo"] is None

    def test_decimal_average_is_served_as_number(self, client, database):
        database.student_docs.append({
            "codigo_estudiante": "C8",
            "password_hash": "p8",
            "promedio_ponderado": Decimal128("16.25"),
        })

        response = client.post("/api/auth/login", json={"codigoEstudiante": "C8", "password": "p8"})

        assert response.status_code == 200
        assert response.json()["promedio_ponderado"] == 16.25

    def test_malformed_stored_record_returns_problem(self, client, database):
        """A record that cannot be read as a student is reported, not raised."""
        database.student_docs.append({
            "codigo_estudiante": "C9",
            "password_hash": "p9",
            "cursos_inscritos": "MA202",
        })

        response = client.post("/api/auth/login", json={"codigoEstudiante": "C9", "password": "p9"})

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.json()["detail"].startswith("Registro de estudiante inválido: ")

    def test_missing_field_is_rejected(self, client):
        response = client.post("/api/auth/login", json={"codigoEstudiante": "C1"})

        assert response.status_code == 422

    def test_store_failure_returns_500(self, client, database):
        database.fail_with = ServerSelectionTimeoutError("no servers")

        response = client.post("/api/auth/login", json={"codigoEstudiante": "C1", "password": "p1"})

        assert response.status_code == 500
        assert "no servers" in response.json()["detail"]


class TestChat:
    """POST /api/chat"""

    QUESTION = "¿Cómo me retiro de un curso?"

    def test_first_call_inserts_default_regulations(self, client, database, ollama):
        """An empty collection ends with exactly one default regulations document."""
        response = client.post("/api/chat", json={"Pregunta": self.QUESTION})

        assert response.status_code == 200
        assert response.json() == {"respuesta": "Debes llenar el formulario F-02."}
        regulations = [d for d in database.general_docs if d["tipo"] == REGULATIONS_TYPE]
        assert len(regulations) == 1
        assert regulations[0]["contenido"] == DEFAULT_REGULATIONS_CONTENT

    def test_later_calls_reuse_stored_document(self, client, database, ollama):
        client.post("/api/chat", json={"Pregunta": self.QUESTION})
        client.post("/api/chat", json={"Pregunta": "¿Cuánto cuesta el trámite?"})

        assert len(database.general_docs) == 1
        assert len(ollama.requests) == 2
        assert all(DEFAULT_REGULATIONS_CONTENT in r["prompt"] for r in ollama.requests)

    def test_stored_regulations_are_used_verbatim(self, client, database, ollama):
        database.general_docs.append({"tipo": "reglamento", "contenido": "Artículo 1: Solo los lunes."})

        client.post("/api/chat", json={"Pregunta": self.QUESTION})

        assert len(database.general_docs) == 1
        assert "Artículo 1: Solo los lunes." in ollama.requests[0]["prompt"]
        assert DEFAULT_REGULATIONS_CONTENT not in ollama.requests[0]["prompt"]

    def test_model_call_carries_context_then_question(self, client, ollama, settings):
        client.post("/api/chat", json={"Pregunta": self.QUESTION})

        sent = ollama.requests[0]
        assert ollama.urls == [f"{settings.ollama.base_url}/api/generate"]
        assert sent["model"] == "tinyllama"
        assert sent["stream"] is False
        prompt = sent["prompt"]
        assert prompt.index(DEFAULT_REGULATIONS_CONTENT) < prompt.index(self.QUESTION)

    def test_model_error_status(self, client, ollama):
        ollama.status_code = 503

        response = client.post("/api/chat", json={"Pregunta": self.QUESTION})

        assert response.status_code == 500
        assert response.json()["detail"] == "Error llamando a la API de Ollama."

    def test_null_model_answer_is_relayed_as_empty_text(self, client, ollama):
        ollama.body = lambda: httpx.Response(200, json={"response": None})

        response = client.post("/api/chat", json={"Pregunta": self.QUESTION})

        assert response.status_code == 200
        assert response.json() == {"respuesta": ""}

    def test_non_text_model_answer(self, client, ollama):
        """A reply whose answer is not text is reported as a chat failure."""
        ollama.body = lambda: httpx.Response(200, json={"response": 5})

        response = client.post("/api/chat", json={"Pregunta": self.QUESTION})

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/problem+json")
        detail = response.json()["detail"]
        assert detail.startswith("Error procesando el chat: ")
        assert "'response' is int" in detail

    def test_unparseable_model_reply(self, client, ollama):
        ollama.body = lambda: httpx.Response(200, text="not json")

        response = client.post("/api/chat", json={"Pregunta": self.QUESTION})

        assert response.status_code == 500
        detail = response.json()["detail"]
        assert detail.startswith("Error procesando el chat: ")
        assert detail.endswith("Asegúrate de que Ollama esté corriendo.")

    def test_store_failure(self, client, database, ollama):
        database.fail_with = ServerSelectionTimeoutError("no servers")

        response = client.post("/api/chat", json={"Pregunta": self.QUESTION})

        assert response.status_code == 500
        assert "no servers" in response.json()["detail"]
        assert ollama.requests == []

    def test_missing_question_is_rejected(self, client):
        assert client.post("/api/chat", json={}).status_code == 422


class TestServiceShell:
    """Root, health and CORS."""

    def test_root_and_health(self, client):
        assert client.get("/").json()["message"] == "Student Portal API"
        assert client.get("/health").json() == {"status": "healthy"}

    def test_allowed_origin_gets_cors_headers(self, client):
        response = client.options(
            "/api/chat",
            headers={
                "Origin": "http://localhost:9000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:9000"

    def test_other_origins_are_not_allowed(self, client):
        response = client.get("/health", headers={"Origin": "http://evil.example"})

        assert "access-control-allow-origin" not in response.headers

    def test_openapi_docs_list_endpoints(self, client):
        paths = client.get("/openapi.json").json()["paths"]

        assert {"/test-mongo-connection", "/api/auth/login", "/api/chat"} <= set(paths)
