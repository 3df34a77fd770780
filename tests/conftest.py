"""Shared fixtures: a small text-serialized Unity project on disk."""

from pathlib import Path

import pytest

HEADER = "%YAML 1.1\n%TAG !u! tag:unity3d.com,2011:\n"

PLAYER_GUID = "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
RED_MATERIAL_GUID = "12345678901234567890123456789012"
ENEMY_PREFAB_GUID = "bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"
DELETED_GUID = "cccccccccccccccccccccccccccccccc"
DELETED_SCRIPT_GUID = "dddddddddddddddddddddddddddddddd"

MAIN_SCENE = (
    HEADER
    + """--- !u!1 &100
GameObject:
  m_ObjectHideFlags: 0
  m_Component:
  - component: {fileID: 101}
  m_Name: Root
--- !u!4 &101
Transform:
  m_ObjectHideFlags: 0
  m_GameObject: {fileID: 100}
  m_Children:
  - {fileID: 201}
  m_Father: {fileID: 0}
--- !u!1 &200
GameObject:
  m_ObjectHideFlags: 0
  m_Component:
  - component: {fileID: 201}
  - component: {fileID: 202}
  - component: {fileID: 203}
  - component: {fileID: 204}
  - component: {fileID: 205}
  m_Name: Child
--- !u!4 &201
Transform:
  m_GameObject: {fileID: 200}
  m_Children: []
  m_Father: {fileID: 101}
--- !u!23 &202
MeshRenderer:
  m_GameObject: {fileID: 200}
  m_Enabled: 1
  m_Materials:
  - {fileID: 2100000, guid: cccccccccccccccccccccccccccccccc, type: 2}
  m_StaticBatchRoot: {fileID: 0}
--- !u!114 &204
MonoBehaviour:
  m_GameObject: {fileID: 200}
  m_Enabled: 1
  m_Script: {fileID: 11500000, guid: aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa, type: 3}
  m_EditorClassIdentifier:
  target: {fileID: 999}
  healthBar: {fileID: 0}
--- !u!114 &205
MonoBehaviour:
  m_GameObject: {fileID: 200}
  m_Enabled: 1
  m_Script: {fileID: 11500000, guid: dddddddddddddddddddddddddddddddd, type: 3}
  speed: 4
--- !u!1 &300
GameObject:
  m_ObjectHideFlags: 1
  m_Component:
  - component: {fileID: 301}
  m_Name: Hidden
--- !u!1001 &400
PrefabInstance:
  m_ObjectHideFlags: 0
  serializedVersion: 2
  m_Modification:
    m_TransformParent: {fileID: 101}
    m_Modifications:
    - target: {fileID: 1001, guid: bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb, type: 3}
      propertyPath: m_Name
      value: EnemyInstance
      objectReference: {fileID: 0}
  m_SourcePrefab: {fileID: 100100000, guid: bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb, type: 3}
--- !u!4 &401 stripped
Transform:
  m_CorrespondingSourceObject: {fileID: 1001, guid: bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb, type: 3}
  m_PrefabInstance: {fileID: 400}
--- !u!1 &500
GameObject:
  m_ObjectHideFlags: 0
  m_Component:
  - component: {fileID: 501}
  - component: {fileID: 502}
  m_Name: Attachment
--- !u!4 &501
Transform:
  m_GameObject: {fileID: 500}
  m_Children: []
  m_Father: {fileID: 401}
--- !u!33 &502
MeshFilter:
  m_GameObject: {fileID: 500}
  m_Mesh: {fileID: 4300000, guid: cccccccccccccccccccccccccccccccc, type: 3}
"""
)

LEVEL_SCENE = (
    HEADER
    + """--- !u!1 &10
GameObject:
  m_Component:
  - component: {fileID: 11}
  - component: {fileID: 12}
  - component: {fileID: 13}
  m_Name: Sun
--- !u!4 &11
Transform:
  m_GameObject: {fileID: 10}
  m_Children: []
  m_Father: {fileID: 0}
--- !u!65 &12
BoxCollider:
  m_GameObject: {fileID: 10}
  m_Material: {fileID: 13400000, guid: 12345678901234567890123456789012, type: 2}
--- !u!108 &13
Light:
  m_GameObject: {fileID: 10}
  m_Cookie: {fileID: 10300, guid: 0000000000000000f000000000000000, type: 0}
  m_Flare: {fileID: 12100000, guid: cccccccccccccccccccccccccccccccc, type: 2}
"""
)

DISABLED_SCENE = (
    HEADER
    + """--- !u!1 &1
GameObject:
  m_Component:
  - component: {fileID: 2}
  m_Name: Unused
"""
)

ENEMY_PREFAB = (
    HEADER
    + """--- !u!1 &1000
GameObject:
  m_Component:
  - component: {fileID: 1001}
  - component: {fileID: 1002}
  m_Name: Enemy
--- !u!4 &1001
Transform:
  m_GameObject: {fileID: 1000}
  m_Children:
  - {fileID: 1011}
  m_Father: {fileID: 0}
--- !u!114 &1002
MonoBehaviour:
  m_GameObject: {fileID: 1000}
  m_Enabled: 1
  m_Script: {fileID: 11500000, guid: aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa, type: 3}
  weapon: {fileID: 4000, guid: cccccccccccccccccccccccccccccccc, type: 3}
  target: {fileID: 0}
--- !u!1 &1010
GameObject:
  m_Component:
  - component: {fileID: 1011}
  - component: {fileID: 1012}
  m_Name: Gun
--- !u!4 &1011
Transform:
  m_GameObject: {fileID: 1010}
  m_Children: []
  m_Father: {fileID: 1001}
"""
)

CLEAN_PREFAB = (
    HEADER
    + """--- !u!1 &1
GameObject:
  m_Component:
  - component: {fileID: 2}
  m_Name: Clean
--- !u!4 &2
Transform:
  m_GameObject: {fileID: 1}
  m_Children: []
  m_Father: {fileID: 0}
"""
)

VARIANT_PREFAB = (
    HEADER
    + """--- !u!1001 &1
PrefabInstance:
  m_Modification:
    m_TransformParent: {fileID: 0}
    m_Modifications: []
  m_SourcePrefab: {fileID: 100100000, guid: bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb, type: 3}
"""
)

BUILD_SETTINGS = (
    HEADER
    + """--- !u!1045 &1
EditorBuildSettings:
  m_ObjectHideFlags: 0
  serializedVersion: 2
  m_Scenes:
  - enabled: 1
    path: Assets/Scenes/Main.unity
    guid: eeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee
  - enabled: 0
    path: Assets/Scenes/Disabled.unity
    guid: eeeeeeeeeeeeeeeeeeeeeeeeeeeeeee1
  - enabled: 1
    path: Assets/Scenes/Deleted.unity
    guid: eeeeeeeeeeeeeeeeeeeeeeeeeeeeeee2
  - enabled: 1
    path: Assets/Scenes/Level.unity
    guid: eeeeeeeeeeeeeeeeeeeeeeeeeeeeeee3
"""
)


def _write_asset(project: Path, relative_path: str, content: str, guid: str = None):
    path = project / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    if guid:
        (project / f"{relative_path}.meta").write_text(f"fileFormatVersion: 2\nguid: {guid}\n", encoding="utf-8")


def write_unity_project(root: Path) -> Path:
    """Write the sample project under root and return its directory."""
    project = root / "SampleProject"
    _write_asset(project, "Assets/Scripts/Player.cs", "public class Player {}\n", PLAYER_GUID)
    _write_asset(project, "Assets/Materials/Red.mat", HEADER, RED_MATERIAL_GUID)
    _write_asset(project, "Assets/Scenes/Main.unity", MAIN_SCENE, "eeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee")
    _write_asset(project, "Assets/Scenes/Disabled.unity", DISABLED_SCENE, "eeeeeeeeeeeeeeeeeeeeeeeeeeeeeee1")
    _write_asset(project, "Assets/Scenes/Level.unity", LEVEL_SCENE, "eeeeeeeeeeeeeeeeeeeeeeeeeeeeeee3")
    _write_asset(project, "Assets/Prefabs/Enemy.prefab", ENEMY_PREFAB, ENEMY_PREFAB_GUID)
    _write_asset(project, "Assets/Prefabs/Clean.prefab", CLEAN_PREFAB, "ffffffffffffffffffffffffffffff01")
    _write_asset(project, "Assets/Prefabs/Variant.prefab", VARIANT_PREFAB, "ffffffffffffffffffffffffffffff02")
    _write_asset(project, "Assets/Prefabs/Binary.prefab", "\x00\x01binary", "ffffffffffffffffffffffffffffff03")
    _write_asset(project, "ProjectSettings/EditorBuildSettings.asset", BUILD_SETTINGS)
    return project


@pytest.fixture
def unity_project(tmp_path) -> Path:
    """A sample Unity project with scenes, prefabs and build settings."""
    return write_unity_project(tmp_path)
