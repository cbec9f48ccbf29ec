from unittest.mock import patch
from urllib.parse import quote

import pytest


class TestVerifyCode:
    """Test suite for POST /api/verify-code"""

    @pytest.fixture
    def registered_user(self, client, unique_user_data, email_sender):
        response = client.post("/api/sign-up", json=unique_user_data)
        assert response.status_code == 201, response.json()
        assert len(email_sender.sent) == 1
        return unique_user_data

    def test_verify_with_emailed_code(self, client, registered_user, email_sender):
        response = client.post(
            "/api/verify-code",
            json={
                "userName": registered_user["userName"],
                "code": email_sender.last_code,
                "action": "verify",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Account verified successfully"}

    def test_action_defaults_to_verify(self, client, registered_user, email_sender):
        response = client.post(
            "/api/verify-code",
            json={"userName": registered_user["userName"], "code": email_sender.last_code},
        )

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_verify_again_after_success(self, client, registered_user, email_sender):
        payload = {"userName": registered_user["userName"], "code": email_sender.last_code}
        client.post("/api/verify-code", json=payload)

        response = client.post("/api/verify-code", json=payload)

        assert response.status_code == 200
        assert response.json()["message"] == "Account is already verified"

    def test_incorrect_code(self, client, registered_user, email_sender):
        wrong = "100000" if email_sender.last_code != "100000" else "100001"

        response = client.post(
            "/api/verify-code",
            json={"userName": registered_user["userName"], "code": wrong},
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Incorrect verification code"}

    def test_missing_code(self, client, registered_user):
        response = client.post(
            "/api/verify-code", json={"userName": registered_user["userName"], "action": "verify"}
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Verification code is required"}

    def test_unknown_user(self, client):
        response = client.post("/api/verify-code", json={"userName": "ghost", "code": "123456"})

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "User not found"}

    def test_resend_unknown_user_sends_no_email(self, client, email_sender):
        response = client.post("/api/verify-code", json={"userName": "ghost", "action": "resend"})

        assert response.status_code == 404
        assert email_sender.sent == []

    def test_resend_issues_new_code(self, client, registered_user, email_sender):
        old_code = email_sender.last_code

        with patch(
            "skillconnect.features.auth.services.verification_service.generate_verification_code",
            return_value="111111" if old_code != "111111" else "222222",
        ):
            response = client.post(
                "/api/verify-code",
                json={"userName": registered_user["userName"], "action": "resend"},
            )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "New verification code sent successfully",
        }
        assert len(email_sender.sent) == 2
        new_code = email_sender.last_code

        stale = client.post(
            "/api/verify-code",
            json={"userName": registered_user["userName"], "code": old_code},
        )
        assert stale.status_code == 400
        assert stale.json()["message"] == "Incorrect verification code"

        fresh = client.post(
            "/api/verify-code",
            json={"userName": registered_user["userName"], "code": new_code},
        )
        assert fresh.status_code == 200

    def test_resend_delivery_failure(self, client, registered_user, email_sender):
        email_sender.fail_with = "Failed to send verification email"

        response = client.post(
            "/api/verify-code",
            json={"userName": registered_user["userName"], "action": "resend"},
        )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Failed to send verification email",
        }

    def test_resend_for_verified_account(self, client, registered_user, email_sender):
        client.post(
            "/api/verify-code",
            json={"userName": registered_user["userName"], "code": email_sender.last_code},
        )

        response = client.post(
            "/api/verify-code",
            json={"userName": registered_user["userName"], "action": "resend"},
        )

        assert response.status_code == 400
        assert "already verified" in response.json()["message"].lower()

    def test_url_encoded_user_name(self, client, email_sender):
        data = {"userName": "Jane Doe", "email": "jane.doe.verify@example.com", "password": "secret123"}
        assert client.post("/api/sign-up", json=data).status_code == 201

        response = client.post(
            "/api/verify-code",
            json={"userName": quote("Jane Doe"), "code": email_sender.last_code},
        )

        assert response.status_code == 200

    @pytest.mark.parametrize(
        "body",
        [
            {"code": "123456"},
            {"userName": "", "code": "123456"},
            {"userName": "someone", "action": "delete"},
            ["not", "an", "object"],
        ],
    )
    def test_malformed_body_is_reported_generically(self, client, body):
        response = client.post("/api/verify-code", json=body)

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Error processing your request"}

    def test_invalid_json(self, client):
        response = client.post(
            "/api/verify-code",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Error processing your request"

    def test_unexpected_failure_is_not_leaked(self, client, registered_user):
        with patch(
            "skillconnect.features.auth.services.user_service.UserRepository.get_by_user_name",
            side_effect=RuntimeError("database exploded"),
        ):
            response = client.post(
                "/api/verify-code",
                json={"userName": registered_user["userName"], "code": "123456"},
            )

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Error processing your request"}
