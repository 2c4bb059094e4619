# Quick reference commands (run from repo root). These are comments only; copy/paste as needed.

# Install the package with test dependencies (includes httpx for TestClient)
# python -m pip install -e ".[test]"

# Run the full test suite (Postgres-backed tests skip unless DATABASE_URL is set)
# python -m pytest

# Run focused test files
# python -m pytest tests/test_tokens.py tests/test_accounts.py
# python -m pytest tests/test_users_routes.py
# python -m pytest tests/test_cars_routes.py tests/test_travel_routes.py tests/test_bookings_routes.py
# python -m pytest tests/test_storage.py tests/test_email_utils.py
# DATABASE_URL=postgresql://localhost/safar_test python -m pytest tests/test_stores.py

# Start the API locally (with env vars loaded)
# python -m dotenv run -- python -m uvicorn app.api:app --reload --port 5000

# Or through the entry point (PORT defaults to 5000)
# python -m dotenv run -- python main.py

# Minimal .env
# JWT_SECRET=change-me
# FRONTEND_URL=http://localhost:3000
# DATABASE_URL=postgresql://localhost/safar
# EMAIL_USER=...  EMAIL_PASSWORD=...
# CLOUDINARY_CLOUD_NAME=...  CLOUDINARY_API_KEY=...  CLOUDINARY_API_SECRET=...
# LOG_DIR=logs
