"""
Тесты подстановки фрагментов.
От малого к большому: одиночный фрагмент -> повторы -> #pragma once -> ошибки графа
"""

import pytest

from glslmerge.errors import AmbiguousEntryError, CyclicDependencyError, MissingSourceError
from glslmerge.graph import build_graph
from glslmerge.merge import MergeContext, merge_sources
from glslmerge.order import topological_order


def test_single_fragment_passes_through():
    source = "void main() {\n    gl_FragColor = vec4(1.0);\n}\n"
    assert merge_sources({"main.frag": source}) == source


def test_simple_include():
    sources = {
        "main.frag": "#include <color.glsl>\nvoid main() {}\n",
        "color.glsl": "vec4 color() { return vec4(1.0); }",
    }
    assert merge_sources(sources) == "vec4 color() { return vec4(1.0); }\nvoid main() {}\n"


def test_once_fragment_inserted_once():
    sources = {
        "E": "#include <X>\n#include <Y>\nmain",
        "X": "XBODY\n#include <Z>",
        "Y": "YBODY\n#include <Z>",
        "Z": "#pragma once\nZBODY",
    }
    result = merge_sources(sources)

    assert result.count("ZBODY") == 1
    # Y is resolved before X (leaves first), so Z lands under Y
    assert result == "XBODY\n\nYBODY\nZBODY\nmain"


def test_plain_fragment_repeated_for_every_includer():
    sources = {
        "E": "#include <X>\n#include <Y>\nmain",
        "X": "XBODY\n#include <Z>",
        "Y": "YBODY\n#include <Z>",
        "Z": "ZBODY",
    }
    result = merge_sources(sources)

    assert result.count("ZBODY") == 2
    assert result == "XBODY\nZBODY\nYBODY\nZBODY\nmain"


def test_once_fragment_consumed_by_intermediate():
    sources = {
        "base": "#include <a>\n#include <b>\nEND",
        "a": "#pragma once\nAONLY",
        "b": "#pragma once\nBONLY\n#include <a>",
    }
    assert merge_sources(sources) == "BONLY\nAONLY\nEND"


def test_repeated_include_in_one_fragment_inserted_at_first_site():
    sources = {
        "main": "#include <a>\nmid\n#include <a>\nend",
        "a": "A",
    }
    assert merge_sources(sources) == "A\nmid\nend"


def test_commented_include_passes_through():
    sources = {
        "base.frag": "// #include <incl0.frag>\n#include <incl0.frag>\nvoid main() {}\n",
        "incl0.frag": "float f() { return 0.0; }",
    }
    assert merge_sources(sources) == (
        "// #include <incl0.frag>\nfloat f() { return 0.0; }\nvoid main() {}\n"
    )


def test_whitespace_around_directive_does_not_matter():
    sources = {
        "base.frag": "   #include \t <incl0.frag>  \nvoid main() {}\n",
        "incl0.frag": "INCL0",
    }
    assert merge_sources(sources) == "INCL0\nvoid main() {}\n"


def test_crlf_line_endings_preserved():
    sources = {
        "main": "#include <a>\r\nvoid main() {}\r\n",
        "a": "A",
    }
    assert merge_sources(sources) == "A\r\nvoid main() {}\r\n"


def test_replacement_text_is_literal():
    sources = {"main": "#include <a>\n", "a": r"// \1 \g<0>"}
    assert merge_sources(sources) == "// \\1 \\g<0>\n"


def test_once_marker_stripped_from_entry():
    sources = {"main": "#pragma once\n#include <a>\nx", "a": "A"}
    assert merge_sources(sources) == "A\nx"


def test_nested_once_markers_stripped():
    sources = {
        "main": "#include <a>\n",
        "a": "#pragma once\n#include <b>\nA",
        "b": "#pragma once\nB",
    }
    assert merge_sources(sources) == "B\nA\n"


def test_merge_with_prebuilt_graph_and_order():
    sources = {"main": "#include <a>\nM", "a": "A"}
    graph = build_graph(sources)
    order = topological_order(graph)
    assert merge_sources(sources, graph=graph, order=order) == "A\nM"


def test_merge_context_keeps_resolved_fragments():
    sources = {"main": "#include <a>\nM", "a": "#include <b>\nA", "b": "B"}
    graph = build_graph(sources)
    context = MergeContext(sources=sources, graph=graph)

    assert context.run(topological_order(graph)) == "B\nA\nM"
    assert context.resolved == {"b": "B", "a": "B\nA", "main": "B\nA\nM"}
    assert context.visited == {"b": True, "a": True}


def test_merge_is_repeatable():
    sources = {
        "E": "#include <X>\n#include <Y>\nmain",
        "X": "#include <Z>\nX",
        "Y": "#include <Z>\nY",
        "Z": "#pragma once\nZ",
    }
    assert merge_sources(sources) == merge_sources(sources)


def test_merge_errors():
    with pytest.raises(MissingSourceError):
        merge_sources({"main": "#include <a>"})
    with pytest.raises(AmbiguousEntryError):
        merge_sources({"a": "A", "b": "B"})
    with pytest.raises(CyclicDependencyError):
        merge_sources({"main": "#include <a>", "a": "#include <b>", "b": "#include <a>"})
