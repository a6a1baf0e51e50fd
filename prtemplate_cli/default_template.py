"""Bundled copy of the TiKV pull request template.

Adapted, not verbatim: the upstream template writes its prompts as plain
prose, here they are wrapped in HTML comments so an untouched copy reads as
unanswered without --strict.
"""
from __future__ import annotations

DEFAULT_TEMPLATE_NAME = "pull_request_template.md"

DEFAULT_TEMPLATE = """\
<!--
Thank you for contributing to TiKV!

If you haven't already, please read TiKV's [CONTRIBUTING](https://github.com/tikv/tikv/blob/master/CONTRIBUTING.md) document.

If you're unsure about anything, just ask; somebody should be along to answer within a day or two.

PR Title Format:
1. module [, module2, module3]: what's changed
2. *: what's changed
-->

## What have you changed? (mandatory)

<!--
Please explain IN DETAIL what the changes are in this PR and why they are needed:

- Summarize your change (mandatory)
- How does this PR work? Need a brief introduction for the changed logic (optional)
- Describe clearly one logical change and avoid lazy messages (optional)
- Describe any limitations of the current code (optional)
-->

## What are the type of the changes? (mandatory)

<!--
The currently defined types are listed below, please pick one of the types for this PR by removing the others:

- New feature (change which adds functionality)
- Improvement (change which is an improvement to an existing feature)
- Bug fix (change which fixes an issue)
- Breaking change (fix or feature that would cause existing functionality to change)
- Misc (other changes)
-->

## How has this PR been tested? (mandatory)

<!--
Please describe the tests that you ran to verify your changes. Have you finished unit tests, integration tests, or manual tests?
-->

## Does this PR affect documentation (docs) update? (mandatory)

<!--
If there is document change, please file a PR in ([docs](https://github.com/tikv/website)) and add the PR number here.
-->

## Does this PR affect tidb-ansible update? (mandatory)

<!--
If there is configuration items (including metrics) change, please file a PR in ([tidb-ansible](https://github.com/pingcap/tidb-ansible)) and add the PR number here.
-->

## Refer to a related PR or issue link (optional)

## Benchmark result if necessary (optional)

## Add a few positive/negative examples (optional)
"""
