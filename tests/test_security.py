from __future__ import annotations

from svg_validator.utils.safety import (
    DANGEROUS_FUNCTIONS,
    find_dangerous_functions,
    has_sql_injection_risk,
    has_unescaped_echo,
)


def test_dangerous_functions_reported_in_deny_list_order() -> None:
    text = "<?php unlink($f); eval($code); system('ls'); ?>"
    assert find_dangerous_functions(text) == ["eval", "system", "unlink"]


def test_dangerous_function_needs_call_syntax() -> None:
    assert find_dangerous_functions("<?php $evaluate = 1; evaluate(2); ?>") == []
    assert find_dangerous_functions("<text>system status</text>") == []
    assert find_dangerous_functions("<?php exec ('ls'); ?>") == ["exec"]


def test_every_deny_listed_function_is_detected() -> None:
    for func in DANGEROUS_FUNCTIONS:
        assert find_dangerous_functions(f"<?php {func}($x); ?>") == [func]


def test_unescaped_echo_of_request_parameter() -> None:
    assert has_unescaped_echo("<?php echo $_GET['name']; ?>")
    assert has_unescaped_echo("<?php print $_REQUEST['q']; ?>")
    assert has_unescaped_echo("<text><?= $_POST['title'] ?></text>")


def test_escaped_echo_is_not_flagged() -> None:
    assert not has_unescaped_echo("<?php echo htmlspecialchars($_GET['name']); ?>")
    assert not has_unescaped_echo("<?= htmlspecialchars($_POST['title']) ?>")
    assert not has_unescaped_echo("<?php echo $_GETTER; ?>")


def test_sql_injection_same_line_query_call() -> None:
    assert has_sql_injection_risk(
        "<?php $r = mysqli_query($db, \"SELECT * FROM t WHERE id=\" . $_GET['id']); ?>"
    )
    assert has_sql_injection_risk(
        "<?php $id = $_POST['id']; $db->query(\"DELETE FROM t WHERE id=$id\"); ?>"
    )


def test_sql_parameterized_queries_are_exempt() -> None:
    assert not has_sql_injection_risk(
        "<?php $db->query('SELECT * FROM t WHERE id=' . $db->quote($_GET['id'])); ?>"
    )
    assert not has_sql_injection_risk(
        "<?php $s = $db->prepare('SELECT * FROM t WHERE id=?'); $s->execute([$_GET['id']]); ?>"
    )


def test_sql_requires_parameter_and_call_on_one_line() -> None:
    text = "<?php\n$id = $_GET['id'];\n$rows = $db->query('SELECT 1');\n?>"
    assert not has_sql_injection_risk(text)
    assert not has_sql_injection_risk("<?php $query = $_GET['q']; ?>")
