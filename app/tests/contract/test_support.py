"""
Contract tests for the support FAQ endpoints
"""


def test_list_faqs(client, seed):
    """Test GET /api/pages returns every FAQ"""
    seed(
        "support",
        {"question": "How do I reset my password?", "answer": "Use the login page."},
        {"question": "Who do I call?", "answer": "The office."},
    )

    response = client.get("/api/pages")

    assert response.status_code == 200
    questions = [faq["question"] for faq in response.json()]
    assert questions == ["How do I reset my password?", "Who do I call?"]


def test_list_faqs_documented_path(client, seed):
    """Test GET /api/support serves the same FAQs"""
    seed("support", {"question": "Q", "answer": "A"})

    response = client.get("/api/support")

    assert response.status_code == 200
    assert response.json()[0]["answer"] == "A"


def test_list_faqs_database_failure(failing_client):
    """Test GET /api/pages answers 500 when the database fails"""
    response = failing_client.get("/api/pages")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}
