"""Shared fixtures and fakes for docnav tests."""

from typing import Callable

import pytest

from docnav.domain.types import DocumentationModel, SearchCategory, SearchIndexEntry, TypeRecord
from docnav.infrastructure.registry import MemoryTypeRegistry


class FakeTask:
    """Handle returned by FakeScheduler."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock: callbacks run only when the test advances time."""

    def __init__(self):
        self.now = 0.0
        self.tasks: list[FakeTask] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTask:
        task = FakeTask(self.now + delay, callback)
        self.tasks.append(task)
        return task

    @property
    def pending(self) -> list[FakeTask]:
        return [task for task in self.tasks if not task.cancelled and task.due > self.now]

    def advance(self, seconds: float) -> None:
        start = self.now
        self.now += seconds
        due = sorted(
            (task for task in self.tasks if not task.cancelled and start < task.due <= self.now),
            key=lambda task: task.due,
        )
        for task in due:
            if not task.cancelled:
                task.callback()


def type_entry(category: SearchCategory, qualified_name: str) -> SearchIndexEntry:
    package, _, name = qualified_name.rpartition(".")
    return SearchIndexEntry(category=category, name=name, qualified_name=qualified_name, package_name=package)


def method_entry(owner: str, name: str, params: str = "", return_type: str = "void") -> SearchIndexEntry:
    package, _, type_name = owner.rpartition(".")
    return SearchIndexEntry(
        category=SearchCategory.METHOD,
        name=name,
        qualified_name=f"{owner}.{name}",
        package_name=package,
        type_name=type_name,
        signature=f"{name}({params})",
        return_type=return_type,
    )


def field_entry(owner: str, name: str, field_type: str) -> SearchIndexEntry:
    package, _, type_name = owner.rpartition(".")
    return SearchIndexEntry(
        category=SearchCategory.FIELD,
        name=name,
        qualified_name=f"{owner}.{name}",
        package_name=package,
        type_name=type_name,
        return_type=field_type,
    )


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def search_index() -> list[SearchIndexEntry]:
    return [
        type_entry(SearchCategory.CLASS, "com.acme.model.User"),
        method_entry("com.acme.model.User", "getName", return_type="String"),
        method_entry("com.acme.model.User", "setName", "String"),
        field_entry("com.acme.model.User", "status", "com.acme.model.Status"),
        type_entry(SearchCategory.INTERFACE, "com.acme.repo.Repository"),
        method_entry("com.acme.repo.Repository", "findById", "long", "Optional<T>"),
        method_entry("com.acme.repo.Repository", "findAll", "", "List<T>"),
        type_entry(SearchCategory.ENUM, "com.acme.model.Status"),
        field_entry("com.acme.model.Status", "ACTIVE", "com.acme.model.Status"),
        type_entry(SearchCategory.ANNOTATION, "com.acme.validation.Required"),
        type_entry(SearchCategory.CLASS, "com.acme.service.UserService"),
        method_entry("com.acme.service.UserService", "register", "User, boolean", "User"),
    ]


@pytest.fixture
def registry() -> MemoryTypeRegistry:
    return MemoryTypeRegistry(
        [
            TypeRecord("com.acme.model.User", "User", "com.acme.model", "class"),
            TypeRecord("com.acme.repo.Repository", "Repository", "com.acme.repo", "interface"),
            TypeRecord("com.acme.model.Status", "Status", "com.acme.model", "enum"),
            TypeRecord("com.acme.validation.Required", "Required", "com.acme.validation", "annotation"),
            TypeRecord("com.acme.service.UserService", "UserService", "com.acme.service", "class"),
            TypeRecord("com.acme.util.List", "List", "com.acme.util", "interface"),
            TypeRecord("com.acme.util.String", "String", "com.acme.util", "class"),
        ]
    )


@pytest.fixture
def model(search_index, registry) -> DocumentationModel:
    return DocumentationModel(
        search_index=tuple(search_index),
        registry=registry,
        package_names=("com.acme.model", "com.acme.repo", "com.acme.validation", "com.acme.service"),
    )
