from talent_intake.cv_pipeline.csv_parser import extract_csv_fields, parse_csv, split_skills


def test_pipe_separated_skills_and_numeric_experience():
    text = 'name,email,position,skills,experience\nJane Doe,jane@x.com,Engineer,"Go|Rust",5\n'
    (fields,) = parse_csv(text)
    assert fields.name == "Jane Doe"
    assert fields.email == "jane@x.com"
    assert fields.position == "Engineer"
    assert fields.skills == ["Go", "Rust"]
    assert fields.experience == 5


def test_row_with_fewer_values_than_headers_is_dropped():
    text = "name,email,position,skills,experience\nJane Doe,jane@x.com\nJohn Roe,john@x.com,QA,Git,3\n"
    rows = parse_csv(text)
    assert [r.name for r in rows] == ["John Roe"]


def test_header_only_or_empty_input_yields_nothing():
    assert parse_csv("name,email\n") == []
    assert parse_csv("") == []


def test_headers_are_case_insensitive_and_trimmed():
    (fields,) = parse_csv(" Name , EMAIL ,Skills\nJane,jane@x.com,Python\n")
    assert fields.name == "Jane"
    assert fields.email == "jane@x.com"
    assert fields.skills == ["Python"]


def test_aliases_resolve_in_priority_order():
    fields = extract_csv_fields(
        {
            "full_name": "Jane Doe",
            "role": "Backend Developer",
            "job_title": "ignored",
            "skill": "Go",
            "years": "4",
            "mobile": "555-0100",
            "degree": "BSc",
        }
    )
    assert fields.name == "Jane Doe"
    assert fields.position == "Backend Developer"
    assert fields.skills == ["Go"]
    assert fields.experience == 4
    assert fields.phone == "555-0100"
    assert fields.education == "BSc"


def test_empty_primary_alias_falls_through_to_next():
    (fields,) = parse_csv("name,full_name\n,Jane Doe\n")
    assert fields.name == "Jane Doe"


def test_missing_columns_leave_fields_absent():
    (fields,) = parse_csv("email\njane@x.com\n")
    assert fields.name is None
    assert fields.position is None
    assert fields.skills == []
    assert fields.experience == 0


def test_non_numeric_experience_is_zero():
    rows = parse_csv("name,experience\nA,lots\nB,\nC,7 years\nD,-3\n")
    assert [r.experience for r in rows] == [0, 0, 7, 0]


def test_blank_lines_and_crlf_are_tolerated():
    rows = parse_csv("name,skills\r\nJane,Go;Rust\r\n\r\nJohn,SQL\r\n")
    assert [r.name for r in rows] == ["Jane", "John"]
    assert rows[0].skills == ["Go", "Rust"]


def test_unicode_line_separator_inside_a_cell_does_not_split_the_row():
    (fields,) = parse_csv("name,position,skills\nJane Doe,Senior\u2028Engineer,Go\n")
    assert fields.name == "Jane Doe"
    assert fields.position == "Senior\u2028Engineer"
    assert fields.skills == ["Go"]


def test_quoted_comma_misaligns_the_line():
    # No quoting support: the embedded comma shifts later cells
    (fields,) = parse_csv('name,skills,experience\nJane,"Go,Rust",5\n')
    assert fields.skills == ["Go"]
    assert fields.experience == 0


def test_split_skills_trims_and_dedupes_in_order():
    assert split_skills(" Go | Rust;Go ,  ; Python ") == ["Go", "Rust", "Python"]
    assert split_skills(None) == []


def test_skill_extraction_is_idempotent():
    text = "name,skills\nJane,Rust|Go|Python|Go\n"
    assert parse_csv(text)[0].skills == parse_csv(text)[0].skills == ["Rust", "Go", "Python"]
