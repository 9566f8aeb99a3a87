from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    category: str = "Produtivo"
    is_productive: bool = True

    generate_reply: bool = True
    reply_text: str = "Obrigado pelo contato! Recebemos sua mensagem e retornaremos em breve."
    reply_message: str = "Resposta gerada automaticamente"

    # when set, every classification call fails with this HTTP status
    fail_status: int | None = None

    model_config = SettingsConfigDict(env_prefix="STUB_", env_file=".env", extra="ignore")

settings = Settings()
