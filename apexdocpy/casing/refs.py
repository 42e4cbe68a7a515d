"""Fixed casing tables for Apex type and annotation names.

Keys are lowercase; values are the canonical spelling. Built once at import time.
"""

from types import MappingProxyType
from typing import Final, Mapping

PRIMITIVE_AND_COLLECTION_TYPES: Final[Mapping[str, str]] = MappingProxyType(
    {
        # Primitive types
        "blob": "Blob",
        "boolean": "Boolean",
        "date": "Date",
        "datetime": "Datetime",
        "decimal": "Decimal",
        "double": "Double",
        "id": "ID",
        "integer": "Integer",
        "long": "Long",
        "object": "Object",
        "string": "String",
        "time": "Time",
        # Collection types
        "list": "List",
        "map": "Map",
        "set": "Set",
        # Salesforce-specific types
        "sobject": "SObject",
    }
)

APEX_ANNOTATIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "auraenabled": "AuraEnabled",
        "deprecated": "Deprecated",
        "future": "Future",
        "httpdelete": "HttpDelete",
        "httpget": "HttpGet",
        "httppatch": "HttpPatch",
        "httppost": "HttpPost",
        "httpput": "HttpPut",
        "invocablemethod": "InvocableMethod",
        "invocablevariable": "InvocableVariable",
        "istest": "IsTest",
        "jsonaccess": "JsonAccess",
        "namespaceaccessible": "NamespaceAccessible",
        "readonly": "ReadOnly",
        "remoteaction": "RemoteAction",
        "restresource": "RestResource",
        "suppresswarnings": "SuppressWarnings",
        "testsetup": "TestSetup",
        "testvisible": "TestVisible",
    }
)
