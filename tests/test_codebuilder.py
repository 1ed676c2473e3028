from patternkit.codebuilder import ClassSpec, CodeBuilder


def test_person_example_renders_declaration():
    cb = CodeBuilder("Person").add_field("name", "string").add_field("age", "int")
    assert str(cb) == "class Person\n{\n  string name;\n  int age;\n};\n"


def test_empty_class_has_only_braces():
    assert str(CodeBuilder("Foo")) == "class Foo\n{\n};\n"


def test_add_field_returns_same_builder():
    cb = CodeBuilder("Foo")
    assert cb.add_field("x", "int") is cb


def test_fields_kept_in_insertion_order():
    cb = CodeBuilder("Foo").add_field("b", "int").add_field("a", "bool")
    assert cb.spec.fields == [("b", "int"), ("a", "bool")]
    text = str(cb)
    assert text.index("int b;") < text.index("bool a;")


def test_builder_str_matches_spec_str():
    cb = CodeBuilder("Point").add_field("x", "float")
    assert str(cb) == str(cb.spec)


def test_class_spec_direct():
    spec = ClassSpec("Thing", [("id", "int")])
    assert str(spec).splitlines() == ["class Thing", "{", "  int id;", "};"]