from movie_catalog.domain.csv_line import parse_csv_line, split_genres, strip_quotes


def test_quoted_genre_cell_keeps_commas():
    parts = parse_csv_line('Mad Max: Fury Road,"Action, Adventure, Sci-Fi",2015')
    assert parts == ["Mad Max: Fury Road", "Action, Adventure, Sci-Fi", "2015"]
    assert split_genres(parts[1]) == ["Action", "Adventure", "Sci-Fi"]


def test_plain_line():
    assert parse_csv_line("Moonlight,Drama,2016") == ["Moonlight", "Drama", "2016"]


def test_n_commas_give_n_plus_one_fields():
    assert parse_csv_line(",,") == ["", "", ""]
    assert parse_csv_line("a,b,") == ["a", "b", ""]
    assert parse_csv_line("") == [""]


def test_fields_are_trimmed():
    assert parse_csv_line("  Heat , Crime ,  1995 ") == ["Heat", "Crime", "1995"]
    assert parse_csv_line("a,   ,c") == ["a", "", "c"]


def test_empty_quoted_field():
    assert parse_csv_line('x,"",1999') == ["x", "", "1999"]


def test_quoted_title_with_comma():
    parts = parse_csv_line('"Crouching Tiger, Hidden Dragon","Action, Drama",2000')
    assert parts == ["Crouching Tiger, Hidden Dragon", "Action, Drama", "2000"]


def test_quote_inside_field_toggles_state():
    # a quote mid-field still flips the state, so the comma after it is literal
    parts = parse_csv_line('ab"c,d",e')
    assert parts == ["abc,d", "e"]


def test_doubled_quote_is_not_an_escape():
    parts = parse_csv_line('"say ""hi""",Comedy,2001')
    assert parts == ["say hi", "Comedy", "2001"]


def test_strip_quotes():
    assert strip_quotes('  "Drama"  ') == "Drama"
    assert strip_quotes('""') == ""
    assert strip_quotes('"') == '"'
    assert strip_quotes("Drama") == "Drama"


def test_split_genres_trims_tokens():
    assert split_genres(" Action ,Drama") == ["Action", "Drama"]
    assert split_genres("") == [""]
