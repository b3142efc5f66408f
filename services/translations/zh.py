# -*- coding: utf-8 -*-
"""Simplified Chinese translations."""

ZH_TRANSLATIONS = {
    # Step titles
    "access.step.business": "业务信息",
    "access.step.data_streams": "数据流",
    "access.step.data_sources": "数据源",
    "access.step.data_storages": "数据存储",
    "access.step.audit": "审批信息",

    # Page chrome
    "access.new_access": "新建接入",
    "access.business_detail": "业务详情{id}",

    # Footer
    "access.previous": "上一步",
    "access.next_step": "下一步",
    "access.submit": "提交审批",
    "access.back": "返回",

    # Notices
    "access.check_form_integrity": "请检查表单完整性",
    "access.submitted_successfully": "提交成功",

    # Errors
    "error.api.connection": "无法连接服务器，请重试",
    "error.api.timeout": "服务器响应超时，请重试",
    "error.unexpected": "发生未知错误",
}
