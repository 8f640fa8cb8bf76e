"""Standard sObject API names

Reference data only: object names outside this list are still accepted
(custom objects, objects added by newer API versions, managed packages).
"""

CUSTOM_OBJECT_SUFFIXES = (
    "__c",
    "__mdt",
    "__e",
    "__x",
    "__b",
    "__kav",
    "__ka",
    "__Share",
    "__History",
    "__Feed",
    "__ChangeEvent",
)

STANDARD_OBJECTS: frozenset[str] = frozenset(
    (
        "AIInsightAction",
        "AIInsightFeedback",
        "AIInsightReason",
        "AIInsightValue",
        "AIRecordInsight",
        "AcceptedEventRelation",
        "Account",
        "AccountBrand",
        "AccountCleanInfo",
        "AccountContactRelation",
        "AccountContactRole",
        "AccountInsight",
        "AccountOwnerSharingRule",
        "AccountPartner",
        "AccountRelationship",
        "AccountRelationshipShareRule",
        "AccountShare",
        "AccountTag",
        "AccountTeamMember",
        "AccountTerritoryAssignmentRule",
        "AccountTerritoryAssignmentRuleItem",
        "AccountTerritorySharingRule",
        "AccountUserTerritory2View",
        "ActionCadence",
        "ActionCadenceRule",
        "ActionCadenceRuleCondition",
        "ActionCadenceStep",
        "ActionCadenceStepTracker",
        "ActionCadenceTracker",
        "ActionLinkGroupTemplate",
        "ActionLinkTemplate",
        "ActionPlan",
        "ActionPlanItem",
        "ActionPlanTemplate",
        "ActionPlanTemplateItem",
        "ActionPlanTemplateItemValue",
        "ActionPlanTemplateVersion",
        "ActiveScratchOrg",
        "ActivityHistory",
        "ActivityMetric",
        "AdditionalNumber",
        "Address",
        "AgentWork",
        "AgentWorkSkill",
        "AllowedEmailDomain",
        "Announcement",
        "ApexClass",
        "ApexComponent",
        "ApexLog",
        "ApexPage",
        "ApexPageInfo",
        "ApexTestQueueItem",
        "ApexTestResult",
        "ApexTestResultLimits",
        "ApexTestRunResult",
        "ApexTestSuite",
        "ApexTrigger",
        "AppAnalyticsQueryRequest",
        "AppDefinition",
        "AppExtension",
        "AppMenuItem",
        "AppTabMember",
        "AppleDomainVerification",
        "AppointmentSchedulingPolicy",
        "Approval",
        "Asset",
        "AssetDowntimePeriod",
        "AssetOwnerSharingRule",
        "AssetRelationship",
        "AssetShare",
        "AssetTag",
        "AssetTokenEvent",
        "AssignedResource",
        "AssignmentRule",
        "AssociatedLocation",
        "AsyncApexJob",
        "AttachedContentDocument",
        "AttachedContentNote",
        "Attachment",
        "Audience",
        "AuraDefinition",
        "AuraDefinitionBundle",
        "AuraDefinitionBundleInfo",
        "AuraDefinitionInfo",
        "AuthConfig",
        "AuthConfigProviders",
        "AuthProvider",
        "AuthSession",
        "AuthorizationForm",
        "AuthorizationFormConsent",
        "AuthorizationFormDataUse",
        "AuthorizationFormText",
        "BackgroundOperation",
        "BackgroundOperationResult",
        "BatchApexErrorEvent",
        "Bookmark",
        "BrandTemplate",
        "BusinessHours",
        "BusinessProcess",
        "BusinessProcessDefinition",
        "BusinessProcessFeedback",
        "BusinessProcessGroup",
        "BuyerGroupPricebook",
        "Calendar",
        "CalendarView",
        "CallCenter",
        "CallCoachConfigModifyEvent",
        "CallCoachingMediaProvider",
        "CallDisposition",
        "CallDispositionCategory",
        "CallTemplate",
        "Campaign",
        "CampaignInfluence",
        "CampaignInfluenceModel",
        "CampaignMember",
        "CampaignMemberStatus",
        "CampaignOwnerSharingRule",
        "CampaignShare",
        "CampaignTag",
        "CardPaymentMethod",
        "CartCheckoutSession",
        "CartDeliveryGroup",
        "CartDeliveryGroupMethod",
        "CartItem",
        "CartTax",
        "CartValidationOutput",
        "Case",
        "CaseArticle",
        "CaseComment",
        "CaseContactRole",
        "CaseHistory",
        "CaseMilestone",
        "CaseOwnerSharingRule",
        "CaseShare",
        "CaseSolution",
        "CaseStatus",
        "CaseSubjectParticle",
        "CaseTag",
        "CaseTeamMember",
        "CaseTeamRole",
        "CaseTeamTemplate",
        "CaseTeamTemplateMember",
        "CaseTeamTemplateRecord",
        "CategoryData",
        "CategoryNode",
        "CategoryNodeLocalization",
        "ChannelObjectLinkingRule",
        "ChannelProgram",
        "ChannelProgramLevel",
        "ChannelProgramMember",
        "ChatterActivity",
        "ChatterAnswersActivity",
        "ChatterAnswersReputationLevel",
        "ChatterConversation",
        "ChatterConversationMember",
        "ChatterMessage",
        "ClientBrowser",
        "CollaborationGroup",
        "CollaborationGroupMember",
        "CollaborationGroupMemberRequest",
        "CollaborationGroupRecord",
        "CollaborationInvitation",
        "ColorDefinition",
        "CombinedAttachment",
        "CommSubscription",
        "CommSubscriptionChannelType",
        "CommSubscriptionConsent",
        "CommSubscriptionTiming",
        "CommerceEntitlementBuyerGroup",
        "CommerceEntitlementPolicy",
        "CommerceEntitlementPolicyShare",
        "CommerceEntitlementProduct",
        "Community",
        "ConnectedApplication",
        "ConsumptionRate",
        "ConsumptionSchedule",
        "Contact",
        "ContactCleanInfo",
        "ContactOwnerSharingRule",
        "ContactPointAddress",
        "ContactPointConsent",
        "ContactPointEmail",
        "ContactPointPhone",
        "ContactPointTypeConsent",
        "ContactRequest",
        "ContactRequestShare",
        "ContactShare",
        "ContactSuggestionInsight",
        "ContactTag",
        "ContentAsset",
        "ContentBody",
        "ContentDistribution",
        "ContentDistributionView",
        "ContentDocument",
        "ContentDocumentHistory",
        "ContentDocumentLink",
        "ContentDocumentListViewMapping",
        "ContentDocumentSubscription",
        "ContentFolder",
        "ContentFolderItem",
        "ContentFolderLink",
        "ContentFolderMember",
        "ContentHubItem",
        "ContentHubRepository",
        "ContentNote",
        "ContentNotification",
        "ContentTagSubscription",
        "ContentUserSubscription",
        "ContentVersion",
        "ContentVersionComment",
        "ContentVersionHistory",
        "ContentVersionRating",
        "ContentWorkspace",
        "ContentWorkspaceDoc",
        "ContentWorkspaceMember",
        "ContentWorkspacePermission",
        "ContentWorkspaceSubscription",
        "Contract",
        "ContractContactRole",
        "ContractLineItem",
        "ContractStatus",
        "ContractTag",
        "Conversation",
        "ConversationContextEntry",
        "ConversationEntry",
        "ConversationParticipant",
        "CorsWhitelistEntry",
        "CreditMemo",
        "CreditMemoLine",
        "Crisis",
        "CronJobDetail",
        "CronTrigger",
        "CspTrustedSite",
        "CurrencyType",
        "CustomBrand",
        "CustomBrandAsset",
        "CustomHelpMenuItem",
        "CustomHelpMenuSection",
        "CustomHttpHeader",
        "CustomNotificationType",
        "CustomPermission",
        "CustomPermissionDependency",
        "DandBCompany",
        "Dashboard",
        "DashboardComponent",
        "DashboardTag",
        "DataAssessmentFieldMetric",
        "DataAssessmentMetric",
        "DataAssessmentValueMetric",
        "DataIntegrationRecordPurchasePermission",
        "DataUseLegalBasis",
        "DataUsePurpose",
        "DatacloudCompany",
        "DatacloudContact",
        "DatacloudDandBCompany",
        "DatacloudOwnedEntity",
        "DatacloudPurchaseUsage",
        "DatacloudSocialHandle",
        "DatasetExport",
        "DatasetExportPart",
        "DatedConversionRate",
        "DcSocialProfile",
        "DcSocialProfileHandle",
        "DeclinedEventRelation",
        "DelegatedAccount",
        "DeleteEvent",
        "DigitalSignature",
        "DigitalWallet",
        "DirectMessage",
        "Division",
        "DivisionLocalization",
        "Document",
        "DocumentAttachmentMap",
        "DocumentTag",
        "Domain",
        "DomainSite",
        "DuplicateJob",
        "DuplicateJobDefinition",
        "DuplicateJobMatchingRule",
        "DuplicateJobMatchingRuleDefinition",
        "DuplicateRecordItem",
        "DuplicateRecordSet",
        "DuplicateRule",
        "ElectronicMediaGroup",
        "ElectronicMediaUse",
        "EmailDomainFilter",
        "EmailDomainKey",
        "EmailMessage",
        "EmailMessageRelation",
        "EmailRelay",
        "EmailServicesAddress",
        "EmailServicesFunction",
        "EmailStatus",
        "EmailTemplate",
        "EmbeddedServiceDetail",
        "EmbeddedServiceLabel",
        "Employee",
        "EmployeeCrisisAssessment",
        "EngagementChannelType",
        "EnhancedLetterhead",
        "Entitlement",
        "EntitlementContact",
        "EntitlementTemplate",
        "EntityHistory",
        "EntityMilestone",
        "EntitySubscription",
        "EnvironmentHubMember",
        "Event",
        "EventBusSubscriber",
        "EventLogFile",
        "EventRelation",
        "EventTag",
        "EventWhoRelation",
        "Expense",
        "ExpressionFilter",
        "ExpressionFilterCriteria",
        "ExternalAccountHierarchy",
        "ExternalDataSource",
        "ExternalDataUserAuth",
        "ExternalSocialAccount",
        "FeedAttachment",
        "FeedComment",
        "FeedItem",
        "FeedLike",
        "FeedPollChoice",
        "FeedPollVote",
        "FeedPost",
        "FeedRevision",
        "FeedTrackedChange",
        "FieldHistoryArchive",
        "FieldPermissions",
        "FieldSecurityClassification",
        "FieldServiceMobileSettings",
        "FiscalYearSettings",
        "FlexQueueItem",
        "FlowDefinitionView",
        "FlowInterview",
        "FlowInterviewOwnerSharingRule",
        "FlowInterviewShare",
        "FlowRecordRelation",
        "FlowStageRelation",
        "FlowVariableView",
        "FlowVersionView",
        "Folder",
        "FolderedContentDocument",
        "ForecastingAdjustment",
        "ForecastingDisplayedFamily",
        "ForecastingFact",
        "ForecastingItem",
        "ForecastingOwnerAdjustment",
        "ForecastingQuota",
        "ForecastingShare",
        "ForecastingType",
        "ForecastingUserPreference",
        "FormulaFunction",
        "FormulaFunctionAllowedType",
        "FormulaFunctionCategory",
        "FulfillmentOrder",
        "FulfillmentOrderItemAdjustment",
        "FulfillmentOrderItemTax",
        "FulfillmentOrderLineItem",
        "Goal",
        "GoalLink",
        "GoogleDoc",
        "Group",
        "GroupMember",
        "HashtagDefinition",
        "HealthCareDiagnosis",
        "HealthCareProcedure",
        "Holiday",
        "IconDefinition",
        "Idea",
        "IdeaComment",
        "IdeaReputation",
        "IdeaReputationLevel",
        "IdeaTheme",
        "IdpEventLog",
        "IframeWhiteListUrl",
        "Image",
        "Individual",
        "IndividualHistory",
        "IndividualShare",
        "InternalOrganizationUnit",
        "Invoice",
        "InvoiceLine",
        "JobProfile",
        "KnowledgeArticle",
        "KnowledgeArticleVersion",
        "KnowledgeArticleVersionHistory",
        "KnowledgeArticleViewStat",
        "KnowledgeArticleVoteStat",
        "Knowledge__DataCategorySelection",
        "Knowledge__Feed",
        "Knowledge__ka",
        "Knowledge__kav",
        "KnowledgeableUser",
        "LandingPage",
        "Lead",
        "LeadCleanInfo",
        "LeadOwnerSharingRule",
        "LeadShare",
        "LeadStatus",
        "LeadTag",
        "LegalEntity",
        "LightningExitByPageMetrics",
        "LightningExperienceTheme",
        "LightningOnboardingConfig",
        "LightningToggleMetrics",
        "LightningUsageByAppTypeMetrics",
        "LightningUsageByBrowserMetrics",
        "LightningUsageByFlexiPageMetrics",
        "LightningUsageByPageMetrics",
        "LinkedArticle",
        "LinkedArticleFeed",
        "LinkedArticleHistory",
        "ListEmail",
        "ListEmailIndividualRecipient",
        "ListEmailRecipientSource",
        "ListView",
        "ListViewChart",
        "ListViewChartInstance",
        "LiveAgentSession",
        "LiveAgentSessionHistory",
        "LiveAgentSessionShare",
        "LiveChatBlockingRule",
        "LiveChatButton",
        "LiveChatButtonDeployment",
        "LiveChatButtonSkill",
        "LiveChatDeployment",
        "LiveChatSensitiveDataRule",
        "LiveChatTranscript",
        "LiveChatTranscriptChangeEvent",
        "LiveChatTranscriptEvent",
        "LiveChatTranscriptShare",
        "LiveChatTranscriptSkill",
        "LiveChatUserConfig",
        "LiveChatUserConfigProfile",
        "LiveChatUserConfigUser",
        "LiveChatVisitor",
        "Location",
        "LoginEvent",
        "LoginGeo",
        "LoginHistory",
        "LoginIp",
        "LogoutEventStream",
        "LookedUpFromActivity",
        "Macro",
        "MacroInstruction",
        "MacroUsage",
        "MailmergeTemplate",
        "MaintenanceAsset",
        "MaintenancePlan",
        "MarketingForm",
        "MarketingLink",
        "MatchingRule",
        "MatchingRuleItem",
        "MessagingChannel",
        "MessagingChannelSkill",
        "MessagingConfiguration",
        "MessagingDeliveryError",
        "MessagingEndUser",
        "MessagingLink",
        "MessagingSession",
        "MessagingTemplate",
        "MetadataPackage",
        "MetadataPackageVersion",
        "Metric",
        "MetricDataLink",
        "MetricsDataFile",
        "MilestoneType",
        "MobileSettingsAssignment",
        "MsgChannelLanguageKeyword",
        "MutingPermissionSet",
        "MyDomainDiscoverableLogin",
        "Name",
        "NamedCredential",
        "NamespaceRegistry",
        "NavigationLinkSet",
        "NavigationMenuItem",
        "NavigationMenuItemLocalization",
        "Network",
        "NetworkActivityAudit",
        "NetworkAffinity",
        "NetworkDiscoverableLogin",
        "NetworkMember",
        "NetworkMemberGroup",
        "NetworkModeration",
        "NetworkPageOverride",
        "NetworkSelfRegistration",
        "NetworkUserHistoryRecent",
        "Note",
        "NoteAndAttachment",
        "NoteTag",
        "OauthCustomScope",
        "OauthCustomScopeApp",
        "OauthToken",
        "ObjectPermissions",
        "ObjectTerritory2AssignmentRule",
        "ObjectTerritory2AssignmentRuleItem",
        "ObjectTerritory2Association",
        "OpenActivity",
        "OperatingHours",
        "OperatingHoursHistory",
        "Opportunity",
        "OpportunityCompetitor",
        "OpportunityContactRole",
        "OpportunityContactRoleSuggestionInsight",
        "OpportunityFieldHistory",
        "OpportunityHistory",
        "OpportunityInsight",
        "OpportunityLineItem",
        "OpportunityLineItemSchedule",
        "OpportunityOwnerSharingRule",
        "OpportunityPartner",
        "OpportunityShare",
        "OpportunitySplit",
        "OpportunitySplitType",
        "OpportunityStage",
        "OpportunityTag",
        "OpportunityTeamMember",
        "Order",
        "OrderAdjustmentGroup",
        "OrderAdjustmentGroupSummary",
        "OrderDeliveryGroup",
        "OrderDeliveryGroupSummary",
        "OrderDeliveryMethod",
        "OrderHistory",
        "OrderItem",
        "OrderItemAdjustmentLineItem",
        "OrderItemAdjustmentLineSummary",
        "OrderItemSummary",
        "OrderItemSummaryChange",
        "OrderItemTaxLineItem",
        "OrderItemTaxLineItemSummary",
        "OrderOwnerSharingRule",
        "OrderPaymentSummary",
        "OrderSummary",
        "OrgDeleteRequest",
        "OrgWideEmailAddress",
        "Organization",
        "OutOfOffice",
        "OwnedContentDocument",
        "OwnerChangeOptionInfo",
        "PackageLicense",
        "PackagePushError",
        "PackagePushJob",
        "PackagePushRequest",
        "PackageSubscriber",
        "Partner",
        "PartnerFundAllocation",
        "PartnerFundClaim",
        "PartnerFundRequest",
        "PartnerMarketingBudget",
        "PartnerNetworkConnection",
        "PartnerNetworkRecordConnection",
        "PartnerNetworkSyncLog",
        "PartnerRole",
        "PartyConsent",
        "Payment",
        "PaymentAuthorization",
        "PaymentGateway",
        "PaymentGatewayLog",
        "PaymentGatewayProvider",
        "PaymentGroup",
        "PaymentLineInvoice",
        "PaymentMethod",
        "PendingServiceRouting",
        "Period",
        "PermissionSet",
        "PermissionSetAssignment",
        "PermissionSetGroup",
        "PermissionSetGroupComponent",
        "PermissionSetLicense",
        "PermissionSetLicenseAssign",
        "PermissionSetTabSetting",
        "PersonalizationTargetInfo",
        "PlatformAction",
        "PlatformStatusAlertEvent",
        "PortalDelegablePermissionSet",
        "PresenceConfigDeclineReason",
        "PresenceDeclineReason",
        "PresenceUserConfig",
        "PresenceUserConfigProfile",
        "PresenceUserConfigUser",
        "Pricebook2",
        "Pricebook2History",
        "PricebookEntry",
        "ProcessDefinition",
        "ProcessInstance",
        "ProcessInstanceHistory",
        "ProcessInstanceNode",
        "ProcessInstanceStep",
        "ProcessInstanceWorkitem",
        "ProcessNode",
        "Product2",
        "Product2DataTranslation",
        "ProductCategory",
        "ProductCategoryDataTranslation",
        "ProductConsumed",
        "ProductEntitlementTemplate",
        "ProductItem",
        "ProductItemTransaction",
        "ProductMedia",
        "ProductRequest",
        "ProductRequestLineItem",
        "ProductRequired",
        "ProductTransfer",
        "Profile",
        "ProfileSkill",
        "ProfileSkillEndorsement",
        "ProfileSkillShare",
        "ProfileSkillUser",
        "Prompt",
        "PromptAction",
        "PromptActionOwnerSharingRule",
        "PromptActionShare",
        "PromptLocalization",
        "PromptVersion",
        "PromptVersionLocalization",
        "Question",
        "QuestionDataCategorySelection",
        "QuestionReportAbuse",
        "QuestionSubscription",
        "QueueRoutingConfig",
        "QueueSobject",
        "QuickText",
        "QuickTextUsage",
        "Quote",
        "QuoteDocument",
        "QuoteLineItem",
        "RecentlyViewed",
        "Recommendation",
        "RecordAction",
        "RecordActionHistory",
        "RecordType",
        "RecordTypeLocalization",
        "RecordVisibility",
        "RedirectWhitelistUrl",
        "PushTopic",
        "StreamingChannel",
        "Refund",
        "RefundLinePayment",
        "RegisteredExternalService",
        "RemoteKeyCalloutEvent",
        "Reply",
        "ReplyReportAbuse",
        "ReplyText",
        "Report",
        "ReportTag",
        "ReputationLevel",
        "ReputationLevelLocalization",
        "ReputationPointsRule",
        "ResourceAbsence",
        "ResourcePreference",
        "ReturnOrder",
        "ReturnOrderLineItem",
        "ReturnOrderOwnerSharingRule",
        "RuleTerritory2Association",
        "SOSDeployment",
        "SOSSession",
        "SOSSessionActivity",
        "SalesAIScoreCycle",
        "SalesAIScoreModelFactor",
        "SalesChannel",
        "SalesWorkQueueSettings",
        "SamlSsoConfig",
        "Scontrol",
        "ScontrolLocalization",
        "ScratchOrgInfo",
        "SearchPromotionRule",
        "SecureAgent",
        "SecureAgentsCluster",
        "SecurityCustomBaseline",
        "SelfServiceUser",
        "ServiceAppointment",
        "ServiceAppointmentStatus",
        "ServiceChannel",
        "ServiceChannelFieldPriority",
        "ServiceChannelStatus",
        "ServiceChannelStatusField",
        "ServiceContract",
        "ServiceContractOwnerSharingRule",
        "ServiceCrew",
        "ServiceCrewMember",
        "ServiceCrewOwnerSharingRule",
        "ServicePresenceStatus",
        "ServiceReport",
        "ServiceReportLayout",
        "ServiceResource",
        "ServiceResourceCapacity",
        "ServiceResourceCapacityHistory",
        "ServiceResourceOwnerSharingRule",
        "ServiceResourceSkill",
        "ServiceTerritory",
        "ServiceTerritoryLocation",
        "ServiceTerritoryMember",
        "ServiceTerritoryWorkType",
        "SessionPermSetActivation",
        "SetupAuditTrail",
        "SetupEntityAccess",
        "Shift",
        "ShiftHistory",
        "ShiftOwnerSharingRule",
        "ShiftShare",
        "ShiftStatus",
        "Shipment",
        "SignupRequest",
        "Site",
        "SiteDetail",
        "SiteDomain",
        "SiteHistory",
        "SiteIframeWhitelistUrl",
        "Skill",
        "SkillProfile",
        "SkillRequirement",
        "SkillUser",
        "SlaProcess",
        "Snippet",
        "SnippetAssignment",
        "SocialPersona",
        "SocialPost",
        "Solution",
        "SolutionStatus",
        "SolutionTag",
        "Stamp",
        "StampAssignment",
        "StaticResource",
        "StoreIntegratedService",
        "Survey",
        "SurveyEmailBranding",
        "SurveyEngagementContext",
        "SurveyInvitation",
        "SurveyPage",
        "SurveyQuestion",
        "SurveyQuestionChoice",
        "SurveyQuestionResponse",
        "SurveyQuestionScore",
        "SurveyResponse",
        "SurveySubject",
        "SurveyVersion",
        "SurveyVersionAddlInfo",
        "TabDefinition",
        "TagDefinition",
        "Task",
        "TaskPriority",
        "TaskRelation",
        "TaskStatus",
        "TaskTag",
        "TaskWhoRelation",
        "TenantSecret",
        "Territory",
        "Territory2",
        "Territory2Model",
        "Territory2ModelHistory",
        "Territory2Type",
        "TestSuiteMembership",
        "ThirdPartyAccountLink",
        "ThreatDetectionFeedback",
        "TimeSheet",
        "TimeSheetEntry",
        "TimeSlot",
        "TimeSlotHistory",
        "Topic",
        "TopicAssignment",
        "TopicLocalization",
        "TopicUserEvent",
        "TransactionSecurityPolicy",
        "TwoFactorInfo",
        "TwoFactorMethodsInfo",
        "TwoFactorTempCode",
        "UiFormulaCriterion",
        "UiFormulaRule",
        "UndecidedEventRelation",
        "User",
        "UserAccountTeamMember",
        "UserAppInfo",
        "UserAppMenuCustomization",
        "UserAppMenuItem",
        "UserAuthCertificate",
        "UserConfigTransferButton",
        "UserConfigTransferSkill",
        "UserCustomBadge",
        "UserCustomBadgeLocalization",
        "UserDevice",
        "UserDeviceApplication",
        "UserEmailCalendarSync",
        "UserEmailPreferredPerson",
        "UserEmailPreferredPersonShare",
        "UserLicense",
        "UserListView",
        "UserListViewCriterion",
        "UserLogin",
        "UserMembershipSharingRule",
        "UserPackageLicense",
        "UserPermissionAccess",
        "UserPreference",
        "UserProfile",
        "UserProvAccount",
        "UserProvAccountStaging",
        "UserProvMockTarget",
        "UserProvisioningConfig",
        "UserProvisioningLog",
        "UserProvisioningRequest",
        "UserRecordAccess",
        "UserRole",
        "UserServicePresence",
        "UserShare",
        "UserTeamMember",
        "UserTerritory",
        "UserTerritory2Association",
        "UserWorkList",
        "UserWorkListItem",
        "VerificationHistory",
        "VisualforceAccessMetrics",
        "VoiceCall",
        "VoiceCallList",
        "VoiceCallListItem",
        "VoiceCallQualityFeedback",
        "VoiceCallRecording",
        "VoiceCoaching",
        "VoiceLocalPresenceNumber",
        "VoiceMailContent",
        "VoiceMailGreeting",
        "VoiceMailMessage",
        "VoiceUserLine",
        "VoiceUserPreferences",
        "VoiceVendorInfo",
        "VoiceVendorLine",
        "Vote",
        "WaveAutoInstallRequest",
        "WebCart",
        "WebCartHistory",
        "WebLink",
        "WebLinkLocalization",
        "WebStore",
        "WebStoreCatalog",
        "WebStorePricebook",
        "Wishlist",
        "WishlistItem",
        "WorkAccess",
        "WorkAccessShare",
        "WorkBadge",
        "WorkBadgeDefinition",
        "WorkCoaching",
        "WorkFeedback",
        "WorkFeedbackQuestion",
        "WorkFeedbackQuestionSet",
        "WorkFeedbackRequest",
        "WorkGoal",
        "WorkGoalCollaborator",
        "WorkGoalCollaboratorHistory",
        "WorkGoalHistory",
        "WorkGoalLink",
        "WorkGoalShare",
        "WorkOrder",
        "WorkOrderHistory",
        "WorkOrderLineItem",
        "WorkOrderLineItemHistory",
        "WorkOrderLineItemStatus",
        "WorkOrderShare",
        "WorkOrderStatus",
        "WorkPerformanceCycle",
        "WorkReward",
        "WorkRewardFund",
        "WorkRewardFundType",
        "WorkThanks",
        "WorkType",
        "WorkTypeGroup",
        "WorkTypeGroupMember",
    )
)


def is_custom_object(object_name: str) -> bool:
    return object_name.endswith(CUSTOM_OBJECT_SUFFIXES)


def is_known_object(object_name: str) -> bool:
    return object_name in STANDARD_OBJECTS or is_custom_object(object_name)
