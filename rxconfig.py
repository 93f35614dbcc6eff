from dotenv import load_dotenv
import reflex as rx
from reflex.plugins.sitemap import SitemapPlugin

load_dotenv()


config = rx.Config(
    app_name="motoparts",
    plugins=[rx.plugins.TailwindV3Plugin()],
    disable_plugins=[SitemapPlugin],
    telemetry_enabled=False,
    theme=rx.theme(
        has_background=True,
        radius="medium",
        spacing="relaxed",
        transitions="gentle",
    ),
)
