#!/usr/bin/env python3
"""
Demo: Compile the example bulk-add form and regroup a submission.

Shows the expanded field list, the YAML hand-off to templates, and how
submitted repeat-block values map back to one record per member.
"""

from formdef.examples import MEMBER_FIELDS, build_example_bulk_add_form
from formdef.forms import collect_repeated
from formdef.serialization import form_to_yaml


def main():
    form = build_example_bulk_add_form(rows=3)

    print("=" * 80)
    print(f"FORM: {form.module}/{form.name} -> {form.action}")
    print("=" * 80)

    for f in form.fields:
        print(f"  {f.name:<24} {f.type.name.lower():<10} {f.label or ''}")

    print("\nYAML:")
    print("-" * 80)
    print(form_to_yaml(form))

    submitted = {
        "fname0": "Ann", "sname0": "Lee", "eduroam0": "al123", "sex0": "f", "collegeid0": 1,
        "fname1": "Bo", "sname1": "Ng", "eduroam1": "bn456", "sex1": "m", "collegeid1": 3,
    }
    print("SUBMITTED MEMBERS:")
    print("-" * 80)
    for member in collect_repeated(submitted, MEMBER_FIELDS):
        print(f"  {member}")


if __name__ == "__main__":
    main()
