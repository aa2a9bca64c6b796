"""外部協調者。

ビジネスロジック（``kata.mocking``）が依存する外部サービスの窓口。
シグネチャだけを固定し、シミュレーション処理は持たない。
テストでは ``unittest.mock.patch`` でモジュール属性ごと差し替える。
"""
