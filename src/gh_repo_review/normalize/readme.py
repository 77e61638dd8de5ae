"""README detection and main-idea extraction."""

from gh_repo_review.models import (
    NO_MAIN_IDEA,
    NO_README,
    README_WITHOUT_MAIN_IDEA,
    RawRepository,
    ReadmeExtraction,
)

README_FILENAME = "readme.md"
MAIN_IDEA_LINES = 3


def find_readme_key(files: dict[str, object]) -> str | None:
    """Return the first key matching ``readme.md`` case-insensitively.

    Keys are scanned in the mapping's insertion order, so when several case
    variants are present the first one wins.
    """
    for filename in files:
        if filename.lower() == README_FILENAME:
            return filename
    return None


def extract_readme_main_idea(repository: RawRepository) -> ReadmeExtraction:
    """Detect the README and summarize its first non-blank lines.

    Args:
        repository: Repository payload, possibly carrying a ``files`` map.

    Returns:
        The raw README text and its main idea, or sentinel values when the
        repository has no README.
    """
    if not repository.files:
        return ReadmeExtraction(readme=NO_README, main_idea=NO_MAIN_IDEA)

    key = find_readme_key(repository.files)
    if key is None:
        return ReadmeExtraction(readme=NO_README, main_idea=NO_MAIN_IDEA)

    content = repository.files[key].content or ""
    lines = [line.strip() for line in content.split("\n")]
    main_idea = " ".join([line for line in lines if line][:MAIN_IDEA_LINES])

    return ReadmeExtraction(readme=content, main_idea=main_idea or README_WITHOUT_MAIN_IDEA)
