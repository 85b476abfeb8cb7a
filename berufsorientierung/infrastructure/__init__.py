"""インフラストラクチャ層モジュール."""
