"""Content analysis: keyword extraction, category inference and taxonomy
reconciliation against the tags and categories already on the backend."""

import asyncio
import re
from collections import Counter

import logfire

from publisher.adapter.error import AdapterError
from publisher.domain.error import DomainError
from publisher.domain.model import Category, Tag
from publisher.domain.repository import HaloRepository
from publisher.domain.value import (
    CategoryName,
    ReconciliationPartialFailure,
    TagName,
)
from publisher.domain.value.common import ValueObject

from .base import Service

MAX_KEYWORDS = 8

# Below this many matched tags, new tags are created from the top keywords
MIN_MATCHED_TAGS = 3
TARGET_TAG_COUNT = 5

DEFAULT_CATEGORY = "default"

# Order matters: the first category with any keyword in the text wins
CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technology": (
        "javascript",
        "python",
        "java",
        "react",
        "vue",
        "编程",
        "开发",
        "代码",
        "api",
        "算法",
        "programming",
        "code",
        "algorithm",
    ),
    "life": ("生活", "日常", "感悟", "随笔", "心情", "体验"),
    "study": ("学习", "教程", "笔记", "总结", "经验", "分享", "tutorial"),
    "tools": ("工具", "软件", "应用", "效率", "推荐"),
    "reflection": ("思考", "观点", "看法", "理解", "感想"),
}

_HTML_TAG = re.compile(r"<[^>]*>")
_TOKEN = re.compile(r"[一-龥]{2,}|[a-zA-Z]{3,}")


class ReconciliationResult(ValueObject):
    """Outcome of matching content against the existing taxonomy."""

    tags: list[TagName] = []
    categories: list[CategoryName] = []
    failures: list[ReconciliationPartialFailure] = []


def extract_keywords(content: str) -> list[str]:
    """Extract the most frequent keywords from text.

    HTML tags are removed, then runs of two or more CJK ideographs and runs of
    three or more ASCII letters are counted. Counting is case-sensitive.

    Args:
        content: Raw post text, possibly containing HTML

    Returns:
        Up to 8 keywords by descending frequency, ties in first-seen order
    """
    text = _HTML_TAG.sub("", content)
    frequency = Counter(_TOKEN.findall(text))
    return [word for word, _ in frequency.most_common(MAX_KEYWORDS)]


def infer_category(title: str, content: str) -> str:
    """Infer a category name from the title and content.

    Table order takes precedence over how many keywords match.

    Args:
        title: Post title
        content: Post body

    Returns:
        Category display name, or ``default`` when nothing matches
    """
    text = f"{title} {content}".lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in text for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def _find_matching_tag(keyword: str, tags: list[Tag]) -> Tag | None:
    """First tag whose display name contains the keyword or is contained by it."""
    needle = keyword.lower()
    for tag in tags:
        label = tag.display_name.lower()
        if label and (needle in label or label in needle):
            return tag
    return None


class ContentAnalyzer(Service):
    """Domain service deriving tags and categories from post content."""

    def __init__(self, halo_repository: HaloRepository) -> None:
        """Initialize content analyzer.

        Args:
            halo_repository: Halo content repository
        """
        self.halo_repository = halo_repository

    extract_keywords = staticmethod(extract_keywords)
    infer_category = staticmethod(infer_category)

    async def generate_tags_and_categories(
        self, title: str, content: str
    ) -> ReconciliationResult:
        """Match content against existing taxonomy, creating what is missing.

        Steps:
        1. Fetch existing tags and categories concurrently
        2. Extract keywords from title and content
        3. Match keywords to existing tags (bidirectional substring)
        4. Create new tags from the top keywords if fewer than 3 matched
        5. Reuse or create the inferred category

        Args:
            title: Post title
            content: Post body

        Returns:
            Tag names, category names and any partial failures

        Raises:
            AdapterError: If listing the existing taxonomy fails
        """
        with logfire.span("content_analyzer.generate_tags_and_categories", title=title):
            existing_tags, existing_categories = await asyncio.gather(
                self.halo_repository.get_tags(),
                self.halo_repository.get_categories(),
            )

            keywords = extract_keywords(f"{title} {content}")
            logfire.info("Keywords extracted", keywords=keywords)

            matched_tags, matched_keywords = self._match_tags(
                keywords, existing_tags.items
            )

            failures: list[ReconciliationPartialFailure] = []
            new_tags: list[TagName] = []
            if len(matched_tags) < MIN_MATCHED_TAGS:
                candidates = keywords[: TARGET_TAG_COUNT - len(matched_tags)]
                new_tags = await self._create_missing_tags(
                    candidates, existing_tags.items, matched_keywords, failures
                )

            categories = await self._resolve_category(
                infer_category(title, content), existing_categories.items, failures
            )

            result = ReconciliationResult(
                tags=matched_tags + new_tags,
                categories=categories,
                failures=failures,
            )
            logfire.info(
                "Taxonomy reconciled",
                matched_tags=matched_tags,
                new_tags=new_tags,
                categories=categories,
                failures=len(failures),
            )
            return result

    @staticmethod
    def _match_tags(
        keywords: list[str], tags: list[Tag]
    ) -> tuple[list[TagName], set[str]]:
        """Match keywords against existing tags.

        Returns:
            Matched tag names in keyword order (duplicates kept) and the
            lower-cased keywords that matched
        """
        matched: list[TagName] = []
        matched_keywords: set[str] = set()
        for keyword in keywords:
            tag = _find_matching_tag(keyword, tags)
            if tag:
                matched.append(tag.name)
                matched_keywords.add(keyword.lower())
        return matched, matched_keywords

    async def _create_missing_tags(
        self,
        keywords: list[str],
        existing: list[Tag],
        matched_keywords: set[str],
        failures: list[ReconciliationPartialFailure],
    ) -> list[TagName]:
        """Create tags one keyword at a time; a failure skips only that keyword."""
        known = {tag.display_name.lower() for tag in existing} | matched_keywords
        created: list[TagName] = []
        for keyword in keywords:
            if keyword.lower() in known:
                continue
            known.add(keyword.lower())
            try:
                tag = await self.halo_repository.create_tag(keyword)
            except (AdapterError, DomainError) as e:
                logfire.warn("Tag creation failed", keyword=keyword, error=str(e))
                failures.append(
                    ReconciliationPartialFailure(kind="tag", name=keyword, message=str(e))
                )
                continue
            logfire.info("Tag created", keyword=keyword, tag_name=tag.name)
            created.append(tag.name)
        return created

    async def _resolve_category(
        self,
        inferred: str,
        existing: list[Category],
        failures: list[ReconciliationPartialFailure],
    ) -> list[CategoryName]:
        """Reuse the category with the inferred display name or create it."""
        for category in existing:
            if category.display_name == inferred:
                logfire.info(
                    "Existing category reused",
                    inferred=inferred,
                    category_name=category.name,
                )
                return [category.name]

        try:
            category = await self.halo_repository.create_category(inferred)
        except (AdapterError, DomainError) as e:
            logfire.warn("Category creation failed", inferred=inferred, error=str(e))
            failures.append(
                ReconciliationPartialFailure(
                    kind="category", name=inferred, message=str(e)
                )
            )
            return []

        logfire.info("Category created", inferred=inferred, category_name=category.name)
        return [category.name]
