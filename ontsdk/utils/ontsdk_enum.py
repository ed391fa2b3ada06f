#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2018-2025 The ontology Authors
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""ONTSDK enumeration with tag/label lookup.

Enumerations of key types, curves and signature schemes are closed sets known
at import time. Each member carries a numeric tag, a textual label and an
optional description, and can be looked up by any of them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from typing_extensions import Self

from ontsdk.exceptions import ONTSDKKeyError, ONTSDKTypeError


@dataclass(frozen=True)
class OntsdkEnumMember:
    """ONTSDK Enum member representation.

    Numeric tag, label and optional description of one enumeration value.
    """

    tag: int
    label: str
    description: Optional[str] = None


class OntsdkEnum(OntsdkEnumMember, Enum):
    """ONTSDK enumeration with tag and label identification.

    Members compare equal to their tag and to their label, which makes them
    usable directly against values read from serialized data.
    """

    def __eq__(self, __value: object) -> bool:
        """Check equality of enum value with another object.

        :param __value: Object to compare with this enum value.
        :return: True if the object equals tag or label, False otherwise.
        """
        if isinstance(__value, OntsdkEnum):
            return type(self) is type(__value) and self.tag == __value.tag
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        """Calculate hash value for the enum instance.

        :return: Hash value as integer.
        """
        return hash((self.tag, self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Get list of labels of all enum members.

        :return: List of all labels.
        """
        return [value.label for value in cls.__members__.values()]

    @classmethod
    def tags(cls) -> list[int]:
        """Get list of tags of all enum members.

        :return: List of all tags.
        """
        return [value.tag for value in cls.__members__.values()]

    @classmethod
    def contains(cls, obj: Union[int, str]) -> bool:
        """Check if given member with given tag/label exists in enum.

        :param obj: Label or tag of enum member to check for existence.
        :raises ONTSDKTypeError: Object must be either string or integer.
        :return: True if member exists, False otherwise.
        """
        if not isinstance(obj, (int, str)):
            raise ONTSDKTypeError("Object must be either string or integer")
        try:
            cls.from_attr(obj)
            return True
        except ONTSDKKeyError:
            return False

    @classmethod
    def from_attr(cls, attribute: Union[int, str]) -> Self:
        """Get enum member with given tag/label attribute.

        :param attribute: Tag value (int) or label value (str) of the enum member to find.
        :return: Found enum member matching the given attribute.
        """
        from_tag: Callable = cls.from_tag
        from_label: Callable = cls.from_label
        from_method: Callable = from_tag if isinstance(attribute, int) else from_label
        return from_method(attribute)

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get enum member with given tag.

        :param tag: Tag to be used for searching
        :raises ONTSDKKeyError: If enum with given tag is not found
        :return: Found enum member
        """
        for item in cls.__members__.values():
            if item.tag == tag:
                return item
        raise ONTSDKKeyError(f"There is no {cls.__name__} item with tag {tag} defined")

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get enum member with given label.

        Labels are matched exactly.

        :param label: Label to be used for searching
        :raises ONTSDKKeyError: If enum with given label is not found or label is not string
        :return: Found enum member
        """
        if not isinstance(label, str):
            raise ONTSDKKeyError("Label must be string")
        for item in cls.__members__.values():
            if item.label == label:
                return item
        raise ONTSDKKeyError(f"There is no {cls.__name__} item with label {label} defined")
