# shopsurvey/store.py
# -*- coding: utf-8 -*-
import threading

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from .models import SurveyRecord


class StoreError(Exception):
    """Raised when the backing database rejects a read or write."""


class SurveyStore:
    """
    surveys 单表存储：只追加，不改不删。

    通过 init_app 挂到 app.extensions["survey_store"]，路由里用
    current_app.extensions 取，不走模块级全局变量。
    """

    def __init__(self, db):
        self.db = db
        # SQLite 只有一个文件锁，写操作在进程内再串行一次
        self._write_lock = threading.Lock()

    def init_app(self, app):
        app.extensions["survey_store"] = self
        with app.app_context():
            self.create_schema()

    def create_schema(self):
        # create_all 只建不存在的表，重复调用无副作用
        self.db.create_all()

    def insert(self, fields: dict) -> int:
        record = SurveyRecord.from_fields(fields)
        with self._write_lock:
            try:
                self.db.session.add(record)
                self.db.session.flush()
                new_id = record.id
                self.db.session.commit()
            except SQLAlchemyError as e:
                self.db.session.rollback()
                raise StoreError("insert failed") from e
        return new_id

    def list_page(self, limit: int, offset: int) -> list:
        q = select(SurveyRecord).order_by(SurveyRecord.id.desc()).limit(limit).offset(offset)
        return self._fetch(q)

    def list_all(self) -> list:
        return self._fetch(select(SurveyRecord).order_by(SurveyRecord.id.asc()))

    def count(self) -> int:
        try:
            return self.db.session.execute(select(func.count(SurveyRecord.id))).scalar() or 0
        except SQLAlchemyError as e:
            raise StoreError("count failed") from e

    def close(self):
        self.db.session.remove()
        self.db.engine.dispose()

    def _fetch(self, q) -> list:
        try:
            return [r.to_dict() for r in self.db.session.execute(q).scalars()]
        except SQLAlchemyError as e:
            raise StoreError("query failed") from e
