"""
Front-matter for the intermediate Markdown document.

Fixed pandoc metadata controlling page margin, base font size and link color.
"""

from omegaconf import OmegaConf

FRONT_MATTER = {
    "geometry": "margin=2cm",
    "fontsize": "11pt",
    "linkcolor": "blue",
}

FRONT_MATTER_DELIMITER = "---"


def wrap_front_matter(markdown: str) -> str:
    """
    Prepend the YAML front-matter block to a Markdown document.

    Args:
        markdown: Composed Markdown body

    Returns:
        Full document text ending with a newline
    """
    metadata = OmegaConf.to_yaml(OmegaConf.create(FRONT_MATTER))
    return f"{FRONT_MATTER_DELIMITER}\n{metadata}{FRONT_MATTER_DELIMITER}\n\n{markdown}\n"
