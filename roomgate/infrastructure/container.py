# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from roomgate.application.interfaces import Clock
from roomgate.application.use_cases.admin.check_admin_password import \
    CheckAdminPasswordUseCase
from roomgate.application.use_cases.codes.generate_code import \
    GenerateCodeUseCase
from roomgate.application.use_cases.codes.validate_code import \
    ValidateCodeUseCase
from roomgate.application.use_cases.credentials.issue_token import \
    IssueTokenUseCase
from roomgate.domain import CodeGenerator, CodePolicy, CodeResolver
from roomgate.infrastructure.observability import PrometheusCodeMetrics
from roomgate.infrastructure.token_signer import JwtTokenSigner
from roomgate.interfaces.http.controllers.admin_controller import \
    AdminController
from roomgate.interfaces.http.controllers.codes_controller import \
    CodesController
from roomgate.interfaces.http.controllers.misc_controller import MiscController
from roomgate.interfaces.http.controllers.token_controller import \
    TokenController
from roomgate.shared.config import AppConfig
from roomgate.shared.utils.clock import utc_now


class Container:
    def __init__(self, config: AppConfig, *, clock: Clock = utc_now) -> None:
        self.config = config
        self.clock = clock

    @cached_property
    def code_policy(self) -> CodePolicy:
        codes = self.config.codes
        return CodePolicy(
            secret=codes.secret,
            bind_label=codes.bind_label,
            lookback_minutes=codes.lookback_minutes,
            lookahead_minutes=codes.lookahead_minutes,
        )

    @cached_property
    def code_generator(self) -> CodeGenerator:
        return CodeGenerator(self.code_policy)

    @cached_property
    def code_resolver(self) -> CodeResolver:
        return CodeResolver(self.code_generator)

    @cached_property
    def code_metrics(self) -> PrometheusCodeMetrics:
        return PrometheusCodeMetrics(enabled=self.config.observability.metrics_enabled)

    @cached_property
    def token_signer(self) -> JwtTokenSigner:
        credentials = self.config.credentials
        return JwtTokenSigner(private_key=credentials.private_key, key_id=credentials.app_id)

    @cached_property
    def generate_code_use_case(self) -> GenerateCodeUseCase:
        return GenerateCodeUseCase(generator=self.code_generator, metrics=self.code_metrics)

    @cached_property
    def validate_code_use_case(self) -> ValidateCodeUseCase:
        return ValidateCodeUseCase(
            resolver=self.code_resolver,
            clock=self.clock,
            metrics=self.code_metrics,
        )

    @cached_property
    def issue_token_use_case(self) -> IssueTokenUseCase:
        return IssueTokenUseCase(
            signer=self.token_signer,
            config=self.config.credentials,
            clock=self.clock,
        )

    @cached_property
    def check_admin_password_use_case(self) -> CheckAdminPasswordUseCase:
        return CheckAdminPasswordUseCase(admin_password=self.config.admin.password)

    @cached_property
    def codes_controller(self) -> CodesController:
        return CodesController(
            generate_use_case=self.generate_code_use_case,
            validate_use_case=self.validate_code_use_case,
        )

    @cached_property
    def token_controller(self) -> TokenController:
        return TokenController(issue_use_case=self.issue_token_use_case)

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController(check_use_case=self.check_admin_password_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(
            bind_label=self.config.codes.bind_label,
            metrics_enabled=self.config.observability.metrics_enabled,
        )
