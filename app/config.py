from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql://postgres:postgres@db:5432/soupshoppe"
    redis_url: str = "redis://redis:6379/0"
    task_broker: str = "redis"  # 'redis' or 'stub' (tests)

    # Auth settings
    session_cookie_name: str = "soupshoppe_session"
    session_max_age: int = 86400 * 7  # 7 days
    session_cookie_secure: bool = False  # True in production
    admin_registration_code: str = ""  # Empty disables /api/register

    # Menu editing
    default_soup_ids: list[str] = ["s6", "s17", "s63"]
    publish_gate_checks_soups: bool = True

    # Uploaded / generated item images
    upload_dir: str = "uploads/items"

    # Image generation provider (OpenAI-compatible images endpoint)
    image_api_url: str = "https://api.openai.com/v1/images/generations"
    image_api_key: str = ""
    image_model: str = "gpt-image-1"
    image_timeout: int = 120
    image_connect_timeout: int = 10

    # Email notifications via Resend
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com/emails"
    notification_from: str = "Soup Shoppe <onboarding@resend.dev>"
    notification_email: str = ""

    # Push notifications via Pushover
    pushover_user_key: str = ""
    pushover_api_token: str = ""
    pushover_api_url: str = "https://api.pushover.net/1/messages.json"

    # Public site URL used in notification links
    site_url: str = "https://www.mysoupshoppe.com"

    class Config:
        env_file = ".env"


settings = Settings()
