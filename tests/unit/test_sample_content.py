"""
Load the bundled sample content pack in data/ end to end.
"""
import pytest

from coursepack.curriculum import load_curriculum
from coursepack.storage import LocalDirectoryStorage


@pytest.fixture
def store(project_root):
    return load_curriculum(LocalDirectoryStorage(project_root / "data"))


def test_modules(store):
    assert store.ids() == ["basic-science", "math", "general"]
    assert store.by_id("basic-science").display_name == "Basic Science"


def test_math_module(store):
    math = store.by_id("math")

    assert [l.title for l in math.sorted_lessons()] == ["Counting", "Addition"]
    assert "<strong>how many</strong>" in math.lessons[0].rendered_content
    assert [q.correct_answer_letter for q in math.quiz_questions] == ["b", "a"]


def test_sagot_quiz(store):
    question = store.by_id("basic-science").quiz_questions[0]

    assert question.prompt == "Ano ang anyo ng yelo?"
    assert question.correct_option.text == "Solido"
