import logging

from domain.errors import ResourceNotFoundError
from domain.models import Image, Label, Panel
from utils.paths import image_source, resolve_asset

logger = logging.getLogger(__name__)


class AnimalPanel:
    """Labels and picture of the selected animal.

    The name is not checked against the known animals; an unknown one
    simply has no image file and gets a placeholder.
    """

    def __init__(self, animal: str, base_dirs=None):
        self.animal = animal
        source = image_source(animal)
        resolved = resolve_asset(source, base_dirs)
        if resolved is None:
            err = ResourceNotFoundError(source)
            logger.warning("%s", err)
            self.error = err
            self.image = Image(source=source, caption=f"Image not available: {source}")
        else:
            logger.info("Loaded: %s", resolved)
            self.error = None
            self.image = Image(source=source, resolved_path=resolved)

    def render(self) -> Panel:
        return Panel(children=(
            Label(f"You are currently watching a {self.animal}"),
            self.image,
            Label(f"And {self.animal} is watching you back"),
        ))
