from jinja2 import Environment


class Alert:
    """Dismissible notice for the alert placeholder."""

    def __init__(
        self,
        message: str,
        *,
        environment: Environment,
        level: str = "success",
        template_name: str = "alert.html",
    ) -> None:
        self.message = message
        self.level = level
        self.env = environment
        self.name = template_name

    def render(self) -> str:
        return self.env.get_template(self.name).render(alert=self)
