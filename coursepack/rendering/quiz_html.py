"""
Quiz HTML rendering.

Produces a self-contained form: one radio group per question and a small
inline script that scores the submitted answers against the parsed answer
letters and colors the result by tier:

- every answer right: green, "Excellent work!"
- at least 70% right: orange, "Good job! Keep practicing."
- otherwise: red, "Keep studying!"
"""

from __future__ import annotations

from html import escape

from coursepack.curriculum.models import DEFAULT_ANSWER_LETTER, OPTION_LETTERS, Module, QuizQuestion

PASS_RATIO = 0.7

FEEDBACK_SCRIPT = (
    "if(s==t){r.style.color='green';r.innerHTML+='<br>Excellent work!';}"
    f"else if(s>=t*{PASS_RATIO}){{r.style.color='orange';r.innerHTML+='<br>Good job! Keep practicing.';}}"
    "else{r.style.color='red';r.innerHTML+='<br>Keep studying!';}"
)


def script_letter(question: QuizQuestion) -> str:
    """Answer letter safe to embed in the grading script; anything but a-d becomes 'a'."""
    letter = question.correct_answer_letter
    if len(letter) == 1 and letter in OPTION_LETTERS:
        return letter
    return DEFAULT_ANSWER_LETTER


def _question_html(index: int, question: QuizQuestion) -> str:
    parts = [f"<div class='q'><p><strong>{index + 1}. {escape(question.prompt)}</strong></p>"]
    for option in question.options:
        parts.append(
            f"<label><input type='radio' name='q{index}' value='{escape(option.letter)}'> "
            f"{escape(option.text)}</label><br>"
        )
    parts.append("</div>")
    return "".join(parts)


def _grading_script(module: Module) -> str:
    checks = "".join(
        f"if(f.elements['q{i}'].value=='{script_letter(q)}')s++;"
        for i, q in enumerate(module.quiz_questions)
    )
    return (
        "<script>function gradeQuiz(){var s=0;"
        f"var t={module.question_count};"
        "var f=document.forms['quizForm'];"
        f"{checks}"
        "var r=document.getElementById('result');"
        "r.innerHTML='Score: '+s+'/'+t;"
        f"{FEEDBACK_SCRIPT}"
        "}</script>"
    )


def render_quiz_html(module: Module) -> str:
    """Render a module's quiz as an HTML form, or "" if it has no quiz."""
    if not module.has_quiz:
        return ""

    html = ["<form id='quizForm'>"]
    html.extend(_question_html(i, q) for i, q in enumerate(module.quiz_questions))
    html.append(
        "<br><button type='button' onclick='gradeQuiz()'>Submit</button></form>"
        "<div id='result'></div>"
    )
    html.append(_grading_script(module))
    return "".join(html)
