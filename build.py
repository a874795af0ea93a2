from pynt import task
from subprocess import check_call

@task()
def document():
  check_call(["sphinx-build", "-b", "html", "docs", "built-docs"])


_common_lint_opts = ["--reports=n", "--indent-string='  '", "--indent-after-paren=2"]
_common_lint_disable = "invalid-name,locally-disabled,missing-docstring,too-few-public-methods"


@task()
def lint_onpage():
  check_call(["pylint", "onpage"] + _common_lint_opts + ["--disable=%s" % _common_lint_disable])


@task()
def lint_tests():
  test_disable = "no-member,protected-access,too-many-public-methods,cell-var-from-loop"
  disable = "--disable=%s,%s" % (_common_lint_disable, test_disable)
  check_call(["pylint", "tests"] + _common_lint_opts + [disable])


@task(lint_onpage, lint_tests)
def lint():
  pass


@task()
def test():
  check_call(["nose2", "-s", ".", "tests"])


@task(document, lint, test)
def __DEFAULT__():
  pass
